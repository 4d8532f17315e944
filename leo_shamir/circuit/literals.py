"""Leo literal formatting and line-block helpers shared by the emitters.

Emitters return immutable tuples of lines, each relative to its own block;
nesting is applied here, once, by the caller that owns the enclosing block.
"""

from typing import Iterable, Tuple

Lines = Tuple[str, ...]


def field_literal(value: int) -> str:
    """Render an integer as a Leo field literal, e.g. ``7field``."""
    return f"{value}field"


def uint_literal(value: int, width: int) -> str:
    """Render an integer as a Leo unsigned literal, e.g. ``3u8``."""
    return f"{value}u{width}"


def indent_lines(lines: Iterable[str], unit: str, levels: int = 1) -> Lines:
    """Indent every non-empty line by ``levels`` units."""
    prefix = unit * levels
    return tuple(prefix + line if line else line for line in lines)


def block(header: str, body: Iterable[str], unit: str) -> Lines:
    """Wrap ``body`` in ``header {`` ... ``}`` with one level of indentation."""
    return (f"{header} {{",) + indent_lines(body, unit) + ("}",)
