"""
check_ignorable.py

Lines that never need a terminator: blanks, comments, bare declaration
keywords, control-flow and declaration keywords, and lines whose code ends
in a structural character such as `{` or `,`.
"""

from semi_lint.comment_splitter import split_trailing_comment
from semi_lint.models import LintConfig
from semi_lint.text_utils import is_blank, ltrim

# Matched as plain prefixes, so `tryAgain()` counts as `try`.
KEYWORD_PREFIXES = (
    "if ", "if(",
    "for ", "for(",
    "while ", "while(",
    "switch ", "switch(",
    "else ",
    "try",
    "catch",
    "finally",
    "class ",
    "export ", "export{",
    "import ", "import(",
    "function ",
    "async function ",
    "throw ",
    "break",
    "continue",
    "yield",
    "await ",
)

RETURN_PREFIXES = ("return ", "return(")

STRUCTURAL_ENDINGS = (";", "{", "}", ":", ",", "(", "=>")


def starts_with_keyword(code: str, config: LintConfig) -> bool:
    if code == "else" or code.startswith(KEYWORD_PREFIXES):
        return True
    if code.startswith(RETURN_PREFIXES):
        return not config.require_return_terminator
    return False


def ends_structurally(code: str) -> bool:
    return not code or code.endswith(STRUCTURAL_ENDINGS)


def is_ignorable(raw: str, config: LintConfig) -> bool:
    trimmed = ltrim(raw)
    code, _ = split_trailing_comment(trimmed)

    # Blank, or nothing but an inline comment
    if is_blank(code):
        return True

    # Comment lines: `// ...`, `/* ...`, `/** ...`, ` * ...`
    if trimmed.startswith(("*", "//", "/*")):
        return True

    if trimmed in ("const", "let", "var"):
        return True

    return starts_with_keyword(code, config) or ends_structurally(code)
