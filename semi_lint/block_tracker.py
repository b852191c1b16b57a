# === semi_lint/block_tracker.py ===

"""
block_tracker.py

Three independent multi-line continuation blocks, each idle or pending:

  - declaration: a line holding only `const`, `let` or `var` opens it; it stays
    open until a line whose raw text contains `;` anywhere.
  - conditional: `if`/`while`/`for`/`else if` (optionally after closing braces)
    whose own parens do not balance; it stays open until the running paren
    count falls to zero or below.
  - return: `return (` with unbalanced parens, counted the same way.

Every line seen while a block is pending (the opening and closing lines
included) is a continuation. A pending tracker never re-checks its trigger.
"""

import re

from semi_lint.models import FileScanState
from semi_lint.text_utils import ltrim, paren_net

DECLARATION_KEYWORDS = ("const", "let", "var")

_COND_START = re.compile(r"(?:if|while|for)[ (]|else if")
_RETURN_PAREN = re.compile(r"return[ \t\n\v\f\r]*\(")


def is_bare_declaration(trimmed: str) -> bool:
    return trimmed in DECLARATION_KEYWORDS


def starts_conditional(trimmed: str) -> bool:
    """
    True for lines like `if (`, `} else if (`, `}} while(`.
    """
    check = ltrim(ltrim(trimmed).lstrip("}"))
    return _COND_START.match(check) is not None


def starts_return_paren(trimmed: str) -> bool:
    return _RETURN_PAREN.match(trimmed) is not None


def advance_declaration(state: FileScanState, raw: str, trimmed: str) -> bool:
    if not state.in_decl_block and is_bare_declaration(trimmed):
        state.in_decl_block = True
    if not state.in_decl_block:
        return False
    if ";" in raw:
        state.in_decl_block = False
    return True


def advance_conditional(state: FileScanState, trimmed: str) -> bool:
    if state.in_cond_block:
        state.cond_paren_net += paren_net(trimmed)
        if state.cond_paren_net <= 0:
            state.in_cond_block = False
        return True
    if starts_conditional(trimmed):
        state.cond_paren_net = paren_net(trimmed)
        if state.cond_paren_net > 0:
            state.in_cond_block = True
            return True
    return False


def advance_return(state: FileScanState, trimmed: str) -> bool:
    if state.in_return_block:
        state.return_paren_net += paren_net(trimmed)
        if state.return_paren_net <= 0:
            state.in_return_block = False
        return True
    if starts_return_paren(trimmed):
        state.return_paren_net = paren_net(trimmed)
        if state.return_paren_net > 0:
            state.in_return_block = True
            return True
    return False


def advance_blocks(state: FileScanState, raw: str, trimmed: str) -> bool:
    """
    Step all three trackers for one line; True if any of them holds the line.
    Each tracker is always stepped, whatever the others report.
    """
    held_decl = advance_declaration(state, raw, trimmed)
    held_cond = advance_conditional(state, trimmed)
    held_return = advance_return(state, trimmed)
    return held_decl or held_cond or held_return
