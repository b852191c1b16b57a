# === semi_lint/file_discovery.py ===

import logging
import os
import shutil
import subprocess
from typing import List

from semi_lint.text_utils import SOURCE_SUFFIX

logger = logging.getLogger(__name__)

DEFAULT_SCAN_DIR = os.path.join("..", "scripts")

GIT_STAGED_CMD = ["git", "diff", "--cached", "--name-only", "--diff-filter=ACMR"]
GIT_WORKTREE_CMD = ["git", "rev-parse", "--is-inside-work-tree"]


def has_source_suffix(path: str) -> bool:
    return path.endswith(SOURCE_SUFFIX)


def discover_source_files(root_dir: str) -> List[str]:
    """
    Walks root_dir recursively (following directory symlinks, with no loop
    detection) and returns every regular file ending in `.js`.
    A missing root gives an empty list.
    """
    found = []
    for dirpath, dirnames, filenames in os.walk(root_dir, followlinks=True):
        for fname in filenames:
            path = os.path.join(dirpath, fname)
            if has_source_suffix(path) and os.path.isfile(path):
                found.append(path)
    return found


def discover_staged_files() -> List[str]:
    """
    Asks git for staged (added/copied/modified/renamed) `.js` files that still
    exist. Anything going wrong with git just means nothing is staged.
    """
    try:
        inside = subprocess.run(GIT_WORKTREE_CMD, capture_output=True, text=True)
        if inside.returncode != 0:
            logger.debug("Not inside a git work tree; no staged files.")
            return []
        staged = subprocess.run(GIT_STAGED_CMD, capture_output=True, text=True)
    except OSError as e:
        logger.warning(f"Could not run git: {e}")
        return []

    files = []
    for line in staged.stdout.splitlines():
        name = line.rstrip("\r\n")
        if not name or not has_source_suffix(name):
            continue
        if not os.path.isfile(name):
            continue
        files.append(name)
    return files


def executable_dir(argv0: str) -> str:
    """
    Directory of the running executable. A bare name is looked up on PATH.
    If the path does not resolve, the parent of the working directory is
    returned instead.
    """
    path = argv0
    if os.sep not in argv0:
        path = shutil.which(argv0) or argv0
    try:
        real = os.path.realpath(path, strict=True)
    except OSError:
        real = os.getcwd()
    return os.path.dirname(real)


def default_scan_root(argv0: str) -> str:
    return os.path.join(executable_dir(argv0), DEFAULT_SCAN_DIR)


def filter_candidates(paths: List[str]) -> List[str]:
    """
    Keeps `.js` paths that exist as regular files, warning about the rest.
    """
    kept = []
    for path in paths:
        if not has_source_suffix(path):
            logger.warning(f"Skipping non-JavaScript file {path}")
            continue
        if not os.path.isfile(path):
            logger.warning(f"Skipping missing file {path}")
            continue
        kept.append(path)
    return kept


def gather_candidates(files: List[str], staged: bool, root_dir: str) -> List[str]:
    """
    Explicit files win; otherwise staged files (if asked for); otherwise, or
    when nothing is staged, the recursive walk of root_dir.
    """
    if files:
        return list(files)
    candidates: List[str] = []
    if staged:
        candidates = discover_staged_files()
        logger.debug(f"Found {len(candidates)} staged file(s).")
    if not candidates:
        candidates = discover_source_files(root_dir)
        logger.debug(f"Found {len(candidates)} file(s) under {root_dir}.")
    return candidates
