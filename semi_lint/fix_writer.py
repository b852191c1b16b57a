# === semi_lint/fix_writer.py ===

import logging
import os
from typing import List

logger = logging.getLogger(__name__)

TEMP_SUFFIX = ".autofix.tmp"


def temp_path_for(file_path: str) -> str:
    return file_path + TEMP_SUFFIX


def write_fixed_lines(file_path: str, lines: List[str]) -> bool:
    """
    Writes `lines` (each followed by a newline) to a sibling temp file, then
    swaps it over `file_path` with os.replace. Returns False, leaving the
    original untouched, if either step fails.

    The temp file is removed on a failed replace when possible, but that
    removal can itself fail and leave it behind.
    """
    tmp_path = temp_path_for(file_path)

    # 1) Create and fill the temp file
    try:
        with open(tmp_path, "w", encoding="utf-8", errors="surrogateescape", newline="") as tmp:
            for line in lines:
                tmp.write(line)
                tmp.write("\n")
    except OSError as e:
        logger.warning(f"Cannot create {tmp_path}: {e}")
        return False

    # 2) Swap it in
    try:
        os.replace(tmp_path, file_path)
    except OSError as e:
        logger.warning(f"Failed to replace {file_path}: {e}")
        try:
            os.unlink(tmp_path)
        except OSError:
            logger.debug(f"Could not remove leftover {tmp_path}")
        return False

    logger.debug(f"Rewrote {file_path}")
    return True
