#!/usr/bin/env python3
"""
scanner.py

Walks a JavaScript file line by line and flags lines that look like they are
missing a trailing semicolon. This is a character heuristic, not a parser:

  - `//` comments are split off (except after `:`, for URLs)
  - running ( and [ depth marks open groups as continuations
  - declaration / conditional / return blocks hold multi-line statements
  - lines ending or followed by operators, commas, closers are continuations
  - blank, comment, keyword and structurally-terminated lines are ignored
  - whatever is left needs a `;` if it ends like an expression

In fix mode every flagged line is rewritten as `code;comment` and the file is
replaced atomically.
"""

import logging
from typing import Iterable, List, Optional

from semi_lint.block_tracker import advance_blocks
from semi_lint.comment_splitter import split_trailing_comment
from semi_lint.depth_tracker import update_depths
from semi_lint.fix_writer import write_fixed_lines
from semi_lint.line_checks.check_continuation import is_continuation
from semi_lint.line_checks.check_ignorable import is_ignorable
from semi_lint.line_checks.check_terminator import needs_terminator
from semi_lint.models import FileScanState, LintConfig, ScanResult, SourceLine, Violation
from semi_lint.text_utils import TERMINATOR, ltrim

logger = logging.getLogger(__name__)


def read_source_lines(file_path: str) -> List[str]:
    """
    Reads a file as a list of lines with every trailing CR/LF removed.
    Undecodable bytes survive via surrogateescape so fix mode can write them back.
    Raises OSError if the file can't be read.
    """
    with open(file_path, "r", encoding="utf-8", errors="surrogateescape", newline="") as f:
        raw_text = f.read()
    if not raw_text:
        return []
    pieces = raw_text.split("\n")
    if raw_text.endswith("\n"):
        pieces.pop()
    return [p.rstrip("\r\n") for p in pieces]


def make_source_line(text: str, lineno: int) -> SourceLine:
    code, comment = split_trailing_comment(text)
    return SourceLine(text=text, lineno=lineno, code=code, comment=comment)


def fix_line(line: SourceLine) -> str:
    return line.code + TERMINATOR + line.comment


def scan_lines(lines: Iterable[str], config: LintConfig, file_path: str = "<memory>") -> ScanResult:
    """
    Scans an ordered sequence of terminator-stripped lines.
    Returns the violations in line order and the output lines fix mode would write.
    """
    lines = list(lines)
    result = ScanResult(file_path=file_path)
    state = FileScanState()

    for idx, text in enumerate(lines):
        line = make_source_line(text, idx + 1)
        next_text = lines[idx + 1] if idx + 1 < len(lines) else ""

        # 1) depth first, so a group opened on this line already counts
        update_depths(state, line.code)

        # 2) block trackers step on every line
        held = advance_blocks(state, line.text, ltrim(line.text))

        # 3) continuation → ignorable → need
        if is_continuation(line, next_text, state, held):
            result.fixed_lines.append(line.text)
            continue
        if is_ignorable(line.text, config) or not needs_terminator(line.code):
            result.fixed_lines.append(line.text)
            continue

        result.violations.append(Violation(file_path=file_path, lineno=line.lineno))
        result.fixed_lines.append(fix_line(line))

    return result


def scan_file(file_path: str, config: LintConfig, fix_mode: bool = False) -> Optional[ScanResult]:
    """
    Scans one file from disk. Returns None when the file can't be read.
    In fix mode the rewritten file replaces the original; a failed write is
    logged and the violations are still returned.
    """
    try:
        lines = read_source_lines(file_path)
    except OSError as e:
        logger.warning(f"Skipping unreadable file {file_path}: {e}")
        return None

    logger.debug(f"Scanning {file_path} ({len(lines)} lines)")
    result = scan_lines(lines, config, file_path)
    logger.debug(f"  → {len(result.violations)} missing semicolon(s) in {file_path}")

    if fix_mode:
        write_fixed_lines(file_path, result.fixed_lines)

    return result


def lint_files(file_paths: Iterable[str], config: LintConfig, fix_mode: bool = False) -> List[Violation]:
    """
    Scans files one after another and returns every violation, file order then line order.
    """
    violations: List[Violation] = []
    for file_path in file_paths:
        result = scan_file(file_path, config, fix_mode)
        if result is not None:
            violations.extend(result.violations)
    return violations
