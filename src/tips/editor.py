"""Editor protocol and the subprocess-backed implementation."""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from tips.config import TipsConfig

logger = logging.getLogger(__name__)


@runtime_checkable
class Editor(Protocol):
    """Anything that can edit a file interactively."""

    def run(self, path: Path) -> int:
        """Edit ``path`` and return the exit status (0 means saved).

        Raises OSError if the editor cannot be started at all.
        """
        ...


@dataclass
class SubprocessEditor:
    """Runs ``<program> <path>`` in the foreground on the current terminal."""

    program: str

    def run(self, path: Path) -> int:
        cmd = [self.program, str(path)]
        logger.debug("Running: %s", " ".join(cmd))
        # stdin/stdout/stderr are inherited; no timeout while the user edits
        result = subprocess.run(cmd)
        logger.debug("%s exited with %d", self.program, result.returncode)
        return result.returncode


def editor_from_config(config: TipsConfig) -> SubprocessEditor:
    return SubprocessEditor(config.editor)
