"""Tests for vitecraft.process - CommandRunner."""

from __future__ import annotations

import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest

from vitecraft.errors import CommandFailedError
from vitecraft.process import CommandRunner


class TestRun:
    """Tests for CommandRunner.run()."""

    def test_runs_in_given_directory(self, tmp_path: Path) -> None:
        with patch("vitecraft.process.shutil.which", return_value=None), \
                patch("vitecraft.process.subprocess.run") as mock_run:
            CommandRunner().run(["npm", "install"], cwd=tmp_path)
        mock_run.assert_called_once_with(["npm", "install"], cwd=tmp_path, check=True)

    def test_executable_resolved_on_path(self, tmp_path: Path) -> None:
        """npm is launched through its PATH entry (npm.cmd on Windows)."""
        npm_cmd = r"C:\Program Files\nodejs\npm.CMD"
        with patch("vitecraft.process.shutil.which", return_value=npm_cmd), \
                patch("vitecraft.process.subprocess.run") as mock_run:
            CommandRunner().run(["npm", "install"], cwd=tmp_path)
        mock_run.assert_called_once_with([npm_cmd, "install"], cwd=tmp_path, check=True)

    def test_non_zero_exit(self, tmp_path: Path) -> None:
        error = subprocess.CalledProcessError(returncode=2, cmd=["npm", "install"])
        with patch("vitecraft.process.subprocess.run", side_effect=error):
            with pytest.raises(CommandFailedError) as exc_info:
                CommandRunner().run(["npm", "install"], cwd=tmp_path)
        assert exc_info.value.returncode == 2
        assert "exit code 2: npm install" in str(exc_info.value)

    def test_missing_executable(self, tmp_path: Path) -> None:
        """A missing tool surfaces as the same error type as a failing one."""
        with patch("vitecraft.process.subprocess.run", side_effect=FileNotFoundError("pnpm")):
            with pytest.raises(CommandFailedError) as exc_info:
                CommandRunner().run(["pnpm", "install"], cwd=tmp_path)
        assert exc_info.value.returncode is None
        assert exc_info.value.argv == ["pnpm", "install"]


class TestSucceeds:
    """Tests for CommandRunner.succeeds()."""

    def test_zero_exit(self, tmp_path: Path) -> None:
        completed = subprocess.CompletedProcess(args=["git"], returncode=0)
        with patch("vitecraft.process.subprocess.run", return_value=completed):
            assert CommandRunner().succeeds(["git", "rev-parse"], cwd=tmp_path) is True

    def test_non_zero_exit(self, tmp_path: Path) -> None:
        completed = subprocess.CompletedProcess(args=["git"], returncode=128)
        with patch("vitecraft.process.subprocess.run", return_value=completed):
            assert CommandRunner().succeeds(["git", "rev-parse"], cwd=tmp_path) is False

    def test_missing_executable(self, tmp_path: Path) -> None:
        with patch("vitecraft.process.subprocess.run", side_effect=FileNotFoundError("git")):
            assert CommandRunner().succeeds(["git", "rev-parse"], cwd=tmp_path) is False
