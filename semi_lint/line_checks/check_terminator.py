"""
check_terminator.py

Final verdict for a line that is neither a continuation nor ignorable.
"""

from semi_lint.text_utils import ASCII_ALNUM, TERMINATOR

NEEDS_AFTER = ASCII_ALNUM + "_)]\"'`"


def needs_terminator(code: str) -> bool:
    if not code:
        return True
    if code.endswith(TERMINATOR):
        return False
    if code.endswith(("++", "--")):
        return True
    last = code[-1]
    if last in NEEDS_AFTER:
        return True
    if last == ",":
        return False
    return True
