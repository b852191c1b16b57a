# === semi_lint/report_generator.py ===

import os
import yaml
from typing import List

from semi_lint.models import Violation

NO_FILES_MESSAGE = "No JavaScript files to lint."
CLEAN_MESSAGE = "No missing semicolons detected."
HEADER_MESSAGE = "Missing semicolons detected:"
FIXED_MESSAGE = "Auto-fix applied where heuristic matched. Review changes."
HINT_MESSAGE = "Run 'fix' to attempt automatic insertion."


def run_succeeded(violations: List[Violation], fix_mode: bool) -> bool:
    return not violations or fix_mode


def render_report(violations: List[Violation], fix_mode: bool) -> str:
    """
    Human-readable summary: the header, one `  path:line` per violation and a
    closing hint, or a single all-clear line.
    """
    if not violations:
        return CLEAN_MESSAGE
    lines = [HEADER_MESSAGE]
    for v in violations:
        lines.append(f"  {v.location}")
    lines.append(FIXED_MESSAGE if fix_mode else HINT_MESSAGE)
    return "\n".join(lines)


def write_yaml_report(violations: List[Violation], fix_mode: bool, out_path: str):
    """
    Dump the violation list as YAML (fix_mode, violation_count, violations).
    """
    out_dir = os.path.dirname(out_path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    data = {
        "fix_mode": fix_mode,
        "violation_count": len(violations),
        "violations": [{"file": v.file_path, "line": v.lineno} for v in violations],
    }
    with open(out_path, "w", encoding="utf-8") as f:
        yaml.dump(data, f, sort_keys=False)
