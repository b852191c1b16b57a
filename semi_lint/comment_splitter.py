# === semi_lint/comment_splitter.py ===

"""
comment_splitter.py

Splits a raw line into its code and trailing `//` comment. This is a plain
character scan: string and regex literals are not recognised, so a `//`
inside a string is taken as a comment unless it directly follows a `:`
(which is what keeps `http://...` intact).
"""

from typing import Tuple

from semi_lint.text_utils import rtrim


def split_trailing_comment(line: str) -> Tuple[str, str]:
    """
    Returns (code, comment). When a comment is found the code is right-trimmed
    and the comment keeps its leading `//`; otherwise the line comes back
    untouched with an empty comment.
    """
    start = 0
    while True:
        idx = line.find("//", start)
        if idx == -1:
            return line, ""
        if idx == 0 or line[idx - 1] != ":":
            return rtrim(line[:idx]), line[idx:]
        start = idx + 1
