# === semi_lint/text_utils.py ===

"""
Character helpers shared by the line classifiers. Whitespace here is the
C-locale set, so non-ASCII spaces are never trimmed.
"""

import string

WHITESPACE = " \t\n\v\f\r"
TERMINATOR = ";"
SOURCE_SUFFIX = ".js"

# Operators that, at the end of a line or the start of the next, mean the
# expression carries on.
BINARY_OPERATORS = "+-*/%^|&"

ASCII_ALNUM = string.ascii_letters + string.digits


def ltrim(text: str) -> str:
    return text.lstrip(WHITESPACE)


def rtrim(text: str) -> str:
    return text.rstrip(WHITESPACE)


def is_blank(text: str) -> bool:
    return not text.strip(WHITESPACE)


def first_char(text: str) -> str:
    """
    First character of `text`, or "" when it is empty.
    """
    return text[:1]


def last_char(text: str) -> str:
    return text[-1:]


def paren_net(text: str) -> int:
    return text.count("(") - text.count(")")
