"""
Tests for candidate file discovery and filtering.
"""

import os
import subprocess

from semi_lint import file_discovery
from semi_lint.file_discovery import (
    default_scan_root,
    discover_source_files,
    discover_staged_files,
    executable_dir,
    filter_candidates,
    gather_candidates,
)


def touch(path):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("x = 1;\n")
    return str(path)


def fake_git(worktree_rc=0, staged_output=""):
    def _run(cmd, **kwargs):
        if cmd == file_discovery.GIT_WORKTREE_CMD:
            return subprocess.CompletedProcess(cmd, worktree_rc, stdout="true\n", stderr="")
        return subprocess.CompletedProcess(cmd, 0, stdout=staged_output, stderr="")
    return _run


class TestRecursiveDiscovery:

    def test_finds_nested_js_files(self, tmp_path):
        a = touch(tmp_path / "a.js")
        b = touch(tmp_path / "core" / "deep" / "b.js")
        touch(tmp_path / "core" / "notes.txt")
        touch(tmp_path / "core" / "c.jsx")
        assert sorted(discover_source_files(str(tmp_path))) == sorted([a, b])

    def test_missing_root(self, tmp_path):
        assert discover_source_files(str(tmp_path / "absent")) == []


class TestStagedDiscovery:

    def test_keeps_existing_js(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        touch(tmp_path / "src" / "a.js")
        touch(tmp_path / "README.md")
        output = "src/a.js\nREADME.md\nsrc/deleted.js\n\n"
        monkeypatch.setattr(file_discovery.subprocess, "run", fake_git(staged_output=output))
        assert discover_staged_files() == ["src/a.js"]

    def test_outside_work_tree(self, monkeypatch):
        monkeypatch.setattr(file_discovery.subprocess, "run", fake_git(worktree_rc=128))
        assert discover_staged_files() == []

    def test_git_missing(self, monkeypatch):
        def no_git(cmd, **kwargs):
            raise FileNotFoundError("git")
        monkeypatch.setattr(file_discovery.subprocess, "run", no_git)
        assert discover_staged_files() == []


class TestGatherCandidates:

    def test_explicit_files_win(self, tmp_path, monkeypatch):
        monkeypatch.setattr(file_discovery, "discover_staged_files", lambda: ["staged.js"])
        assert gather_candidates(["x.js"], True, str(tmp_path)) == ["x.js"]

    def test_staged(self, tmp_path, monkeypatch):
        monkeypatch.setattr(file_discovery, "discover_staged_files", lambda: ["staged.js"])
        assert gather_candidates([], True, str(tmp_path)) == ["staged.js"]

    def test_nothing_staged_falls_back_to_walk(self, tmp_path, monkeypatch):
        monkeypatch.setattr(file_discovery, "discover_staged_files", lambda: [])
        a = touch(tmp_path / "a.js")
        assert gather_candidates([], True, str(tmp_path)) == [a]

    def test_walk_by_default(self, tmp_path):
        a = touch(tmp_path / "lib" / "a.js")
        assert gather_candidates([], False, str(tmp_path)) == [a]


class TestFilterCandidates:

    def test_drops_missing_and_foreign(self, tmp_path, caplog):
        a = touch(tmp_path / "a.js")
        txt = touch(tmp_path / "b.txt")
        missing = str(tmp_path / "c.js")
        directory = tmp_path / "d.js"
        directory.mkdir()
        assert filter_candidates([a, txt, missing, str(directory)]) == [a]
        assert "Skipping missing file" in caplog.text
        assert "Skipping non-JavaScript file" in caplog.text


class TestExecutableDir:

    def test_path_with_separator(self, tmp_path):
        tool = touch(tmp_path / "tools" / "lint")
        assert executable_dir(tool) == os.path.realpath(str(tmp_path / "tools"))

    def test_bare_name_found_on_path(self, tmp_path, monkeypatch):
        tool = tmp_path / "bin" / "semi-lint-test"
        touch(tool)
        tool.chmod(0o755)
        monkeypatch.setenv("PATH", str(tmp_path / "bin"))
        assert executable_dir("semi-lint-test") == os.path.realpath(str(tmp_path / "bin"))

    def test_unresolvable_uses_parent_of_cwd(self, tmp_path, monkeypatch):
        work = tmp_path / "work"
        work.mkdir()
        monkeypatch.chdir(work)
        monkeypatch.setenv("PATH", "")
        assert executable_dir("no-such-tool") == os.path.dirname(os.getcwd())

    def test_default_scan_root(self, tmp_path):
        tool = touch(tmp_path / "tools" / "lint")
        expected = os.path.join(os.path.realpath(str(tmp_path / "tools")), "..", "scripts")
        assert default_scan_root(tool) == expected
