"""Parsing of ``leo run`` stdout.

``split`` prints its result as a nested bracketed array of field literals;
``recover`` prints a single field literal after a bullet, followed by the
``Leo ✅ Finished`` line.
"""

import re
from typing import List, Tuple

from leo_shamir.errors import ParseError

FIELD_LITERAL = re.compile(r"^(\d+)field$")

RESULT_BULLET = "•"
FINISHED_MARKER = "Leo ✅ Finished"


def _field_tokens(text: str) -> List[int]:
    """Field literals in ``text``, brackets, commas and whitespace stripped."""
    tokens = text.replace("[", " ").replace("]", " ").replace(",", " ").split()
    values = []
    for token in tokens:
        match = FIELD_LITERAL.match(token)
        if match:
            values.append(int(match.group(1)))
    return values


def parse_split_output(n: int, output: str) -> List[Tuple[int, int]]:
    """Read the first n (index, value) pairs from ``split`` output.

    Padding sentinels sit after the real points, so only the leading 2n
    literals between the first '[' and the last ']' are used.

    Args:
        n: Number of real evaluation points
        output: stdout of ``leo run split``

    Returns:
        n (index, value) pairs as Python ints

    Raises:
        ParseError: If there is no bracketed array or it holds fewer than 2n literals
    """
    start, end = output.find("["), output.rfind("]")
    if start == -1 or end < start:
        raise ParseError("No bracketed array in split output", output)

    values = _field_tokens(output[start:end + 1])
    if len(values) < 2 * n:
        raise ParseError(f"Expected at least {2 * n} field literals, found {len(values)}", output)
    return [(values[2 * i], values[2 * i + 1]) for i in range(n)]


def parse_recover_output(output: str) -> int:
    """Read the recovered secret from ``recover`` output.

    Raises:
        ParseError: If the result bullet or the field literal is missing
    """
    start = output.rfind(RESULT_BULLET)
    if start == -1:
        raise ParseError("No result bullet in recover output", output)
    end = output.find(FINISHED_MARKER, start)
    segment = output[start + len(RESULT_BULLET):end if end != -1 else len(output)]

    values = _field_tokens(segment)
    if not values:
        raise ParseError("No field literal after the result bullet", output)
    return values[0]
