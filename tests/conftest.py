"""
Pytest configuration and shared fixtures.
"""

import sys
from pathlib import Path

import pytest

# Add the project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from semi_lint.models import LintConfig


# =============================================================================
# CONFIG FIXTURES
# =============================================================================

@pytest.fixture
def default_config():
    """Returns must end in a semicolon."""
    return LintConfig()


@pytest.fixture
def lenient_config():
    """`return` lines are exempt."""
    return LintConfig(require_return_terminator=False)


# =============================================================================
# FILE FIXTURES
# =============================================================================

@pytest.fixture
def js_file(tmp_path):
    """Factory writing a .js file under tmp_path and returning its path as str."""
    def _make(text, name="sample.js"):
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(text.encode("utf-8"))
        return str(path)
    return _make
