# === semi_lint/depth_tracker.py ===

from typing import Tuple

from semi_lint.models import FileScanState


def depth_deltas(code: str) -> Tuple[int, int, int]:
    """
    Net (parens, brackets, braces) opened by one line of code.
    Braces are reported but the scanner never looks at them.
    """
    parens = brackets = braces = 0
    for ch in code:
        if ch == "(":
            parens += 1
        elif ch == ")":
            parens -= 1
        elif ch == "[":
            brackets += 1
        elif ch == "]":
            brackets -= 1
        elif ch == "{":
            braces += 1
        elif ch == "}":
            braces -= 1
    return parens, brackets, braces


def update_depths(state: FileScanState, code: str) -> None:
    """
    Fold one line's deltas into the running file totals.
    """
    parens, brackets, _ = depth_deltas(code)
    state.paren_depth += parens
    state.bracket_depth += brackets


def inside_group(state: FileScanState) -> bool:
    return state.paren_depth > 0 or state.bracket_depth > 0
