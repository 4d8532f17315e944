"""Tests - generator unit tests and toolchain round trip."""
