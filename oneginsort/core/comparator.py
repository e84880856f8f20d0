"""Alphabetic-only line comparison.

Two lines are compared by their ASCII letters alone, case-insensitively.
Spaces, digits, punctuation and any non-ASCII characters are skipped.
The scan runs from the start of both lines (Direction.FORWARD) or from
their ends (Direction.BACKWARD), which orders lines by rhyme.
"""

from functools import cmp_to_key
from typing import Callable

from ..config import Direction, parse_direction
from .line import Line


def is_alpha(ch: str) -> bool:
    """True for ASCII letters only."""
    return ("A" <= ch <= "Z") or ("a" <= ch <= "z")


def to_lower(ch: str) -> str:
    """Lower-case an ASCII letter, leave everything else untouched."""
    if "A" <= ch <= "Z":
        return chr(ord(ch) + 32)
    return ch


def compare(line_a: Line, line_b: Line, direction: Direction = Direction.FORWARD) -> int:
    """Compare two lines ignoring everything but their letters.

    Args:
        line_a: First line
        line_b: Second line
        direction: Scan from the start (FORWARD) or the end (BACKWARD)

    Returns:
        -1, 0 or 1 as ``line_a`` sorts before, together with, or after
        ``line_b``. A line whose letters are a prefix (suffix when scanning
        backward) of the other's sorts first.
    """
    text_a = line_a.buffer.text
    text_b = line_b.buffer.text
    start_a = line_a.start
    start_b = line_b.start

    if direction is Direction.FORWARD:
        step = 1
        i, end_a = start_a, start_a + len(line_a)
        j, end_b = start_b, start_b + len(line_b)
    else:
        # Cursors start on the last character and stop one before the first
        step = -1
        i, end_a = start_a + len(line_a) - 1, start_a - 1
        j, end_b = start_b + len(line_b) - 1, start_b - 1

    while i != end_a and j != end_b:
        ca = text_a[i]
        cb = text_b[j]
        if to_lower(ca) == to_lower(cb):
            i += step
            j += step
            continue

        alpha_a = is_alpha(ca)
        alpha_b = is_alpha(cb)
        if alpha_a and alpha_b:
            break
        if not alpha_a:
            i += step
        if not alpha_b:
            j += step

    # Trailing non-letters do not count
    while i != end_a and not is_alpha(text_a[i]):
        i += step
    while j != end_b and not is_alpha(text_b[j]):
        j += step

    done_a = i == end_a
    done_b = j == end_b
    if done_a and done_b:
        return 0
    if done_a:
        return -1
    if done_b:
        return 1
    return 1 if to_lower(text_a[i]) > to_lower(text_b[j]) else -1


def alphabetic_key(line: Line, direction: Direction = Direction.FORWARD) -> str:
    """The lower-cased letters of a line, in scan order.

    Two lines compare equal exactly when their keys are equal. Handy for
    diagnostics; ``compare`` does not build keys.
    """
    letters = "".join(to_lower(ch) for ch in line.text if is_alpha(ch))
    if direction is Direction.BACKWARD:
        return letters[::-1]
    return letters


class LineComparator:
    """Comparator with its scan direction fixed.

    Callable as ``comparator(a, b)``. ``key`` adapts it for ``sorted`` and
    ``list.sort``.
    """

    def __init__(self, direction: Direction = Direction.FORWARD):
        self.direction = parse_direction(direction)
        self.key: Callable[[Line], object] = cmp_to_key(self)

    def __call__(self, line_a: Line, line_b: Line) -> int:
        return compare(line_a, line_b, self.direction)

    def __repr__(self) -> str:
        return f"LineComparator({self.direction.value})"
