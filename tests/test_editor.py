"""Tests for the subprocess editor (mocked subprocess)."""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from tips.config import TipsConfig
from tips.editor import Editor, SubprocessEditor, editor_from_config


class TestSubprocessEditor:
    def test_satisfies_protocol(self):
        assert isinstance(SubprocessEditor("vim"), Editor)

    def test_runs_program_with_path(self, tmp_path: Path):
        target = tmp_path / "git.tips"
        with patch("tips.editor.subprocess.run", return_value=MagicMock(returncode=0)) as run:
            status = SubprocessEditor("nano").run(target)

        assert status == 0
        run.assert_called_once_with(["nano", str(target)])

    def test_returns_nonzero_status(self, tmp_path: Path):
        with patch("tips.editor.subprocess.run", return_value=MagicMock(returncode=1)):
            assert SubprocessEditor("vim").run(tmp_path / "x.tips") == 1

    def test_missing_program_raises(self, tmp_path: Path):
        editor = SubprocessEditor("tips-test-no-such-editor")
        with pytest.raises(OSError):
            editor.run(tmp_path / "x.tips")


class TestEditorFromConfig:
    def test_uses_configured_program(self, tmp_path: Path):
        editor = editor_from_config(TipsConfig(home=tmp_path, editor="emacs"))
        assert editor == SubprocessEditor("emacs")
