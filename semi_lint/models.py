# === semi_lint/models.py ===

from dataclasses import dataclass, field
from typing import List

@dataclass(frozen=True)
class LintConfig:
    """
    Run-wide options, fixed before the first file is scanned.
    """
    require_return_terminator: bool = True

@dataclass(frozen=True)
class SourceLine:
    """
    One line of a source file, already stripped of its line terminator.
    `code` and `comment` are the split produced by the comment splitter.
    """
    text: str
    lineno: int                   # 1-based
    code: str
    comment: str

@dataclass
class FileScanState:
    """
    Everything the scanner carries from one line to the next within a file.
    A fresh instance is built per file.
    """
    paren_depth: int = 0          # signed, never clamped
    bracket_depth: int = 0
    in_decl_block: bool = False
    in_cond_block: bool = False
    cond_paren_net: int = 0
    in_return_block: bool = False
    return_paren_net: int = 0

@dataclass(frozen=True)
class Violation:
    file_path: str
    lineno: int

    @property
    def location(self) -> str:
        return f"{self.file_path}:{self.lineno}"

@dataclass
class ScanResult:
    """
    Outcome of scanning one file: violations in line order, plus the
    rewritten lines (same count as the input) for fix mode.
    """
    file_path: str
    violations: List[Violation] = field(default_factory=list)
    fixed_lines: List[str] = field(default_factory=list)
