"""
check_continuation.py

Decides whether a line continues the previous logical statement, in which
case it is never asked for a terminator. Looks at the line itself, one line
of lookahead, the running paren/bracket depth and the block trackers.
"""

from semi_lint.depth_tracker import inside_group
from semi_lint.models import FileScanState, SourceLine
from semi_lint.text_utils import BINARY_OPERATORS, first_char, is_blank, last_char, ltrim

LOGICAL_OPERATORS = ("&&", "||")
TERNARY_CHARS = ("?", ":")
CLOSERS = (")", "]")


def is_continuation(line: SourceLine, next_text: str, state: FileScanState, held_by_block: bool) -> bool:
    """
    `state` must already hold this line's depth update, and `held_by_block`
    is what the block trackers reported for this line.
    `next_text` is the raw following line ("" at end of file).
    """
    code = line.code
    trimmed = ltrim(line.text)
    next_trimmed = ltrim(next_text)
    next_first = first_char(next_trimmed)

    # 1) Open ( or [ somewhere above (or on this line)
    if inside_group(state):
        return True

    # 2) Line ends mid-list or mid-expression
    tail = last_char(code)
    if tail == ",":
        return True
    if tail and tail in BINARY_OPERATORS:
        return True

    # 3) Next line picks the expression up
    if next_first in CLOSERS:
        return True
    if next_trimmed.startswith(LOGICAL_OPERATORS):
        return True
    if next_first and next_first in BINARY_OPERATORS:
        return True
    if next_first == ")" and not is_blank(line.text) and last_char(line.text) not in (",", ";"):
        return True

    # 4) declaration / conditional / return blocks
    if held_by_block:
        return True

    # 5) Dangling logical operators and ternary arms
    if trimmed in LOGICAL_OPERATORS or trimmed.endswith(LOGICAL_OPERATORS):
        return True
    if next_first in TERNARY_CHARS:
        return True
    if first_char(trimmed) in TERNARY_CHARS:
        return True

    return False
