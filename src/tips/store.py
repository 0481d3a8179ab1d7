"""Flat-directory tip storage.

Each tip is a plain-text file ``<root>/<name>.tips``. Only files directly
inside the root with the exact ``.tips`` suffix count as tips.
"""

from __future__ import annotations

import errno
import logging
import os
from collections.abc import Iterator
from pathlib import Path

logger = logging.getLogger(__name__)

TIPS_SUFFIX = ".tips"


class TipDecodeError(ValueError):
    """A tip line is not valid UTF-8 and the policy says to fail."""

    def __init__(self, path: Path, lineno: int, error: UnicodeDecodeError) -> None:
        super().__init__(f"{path}:{lineno}: {error}")
        self.path = path
        self.lineno = lineno


class TipStore:
    """Read access to the tips directory, plus creation of empty tips."""

    def __init__(self, root: Path) -> None:
        self.root = root

    def path_for(self, name: str) -> Path:
        return self.root / f"{name}{TIPS_SUFFIX}"

    def exists(self, name: str) -> bool:
        return self.path_for(name).exists()

    # ── Listing ───────────────────────────────────────────────

    def names(self, query: str | None = None) -> Iterator[str]:
        """Yield tip names in directory order, filtered by substring.

        Raises OSError up front if the root is not a directory.
        """
        if not self.root.is_dir():
            code = errno.ENOTDIR if self.root.exists() else errno.ENOENT
            raise OSError(code, os.strerror(code), str(self.root))
        return self._iter_names(query)

    def _iter_names(self, query: str | None) -> Iterator[str]:
        with os.scandir(self.root) as entries:
            for entry in entries:
                stem, suffix = os.path.splitext(entry.name)
                if suffix != TIPS_SUFFIX:
                    continue
                if query is not None and query not in stem:
                    continue
                yield stem

    def lines(
        self,
        name: str,
        query: str | None = None,
        on_decode_error: str = "skip",
    ) -> Iterator[str]:
        """Yield the lines of a tip with trailing whitespace removed.

        Leading whitespace and empty lines are kept. Lines that are not
        valid UTF-8 are handled per ``on_decode_error``: "skip" drops them,
        "warn" drops them with a warning, "fail" raises TipDecodeError.
        Raises OSError up front if the tip is not a regular file.
        """
        path = self.path_for(name)
        if not path.is_file():
            code = errno.EISDIR if path.is_dir() else errno.ENOENT
            raise OSError(code, os.strerror(code), str(path))
        return self._iter_lines(path, query, on_decode_error)

    def _iter_lines(self, path: Path, query: str | None, on_decode_error: str) -> Iterator[str]:
        with path.open("rb") as f:
            for lineno, raw in enumerate(f, start=1):
                try:
                    line = raw.decode("utf-8").rstrip()
                except UnicodeDecodeError as e:
                    if on_decode_error == "fail":
                        raise TipDecodeError(path, lineno, e) from e
                    if on_decode_error == "warn":
                        logger.warning("Skipping undecodable line %d in %s", lineno, path)
                    continue
                if query is not None and query not in line:
                    continue
                yield line

    # ── Creation ──────────────────────────────────────────────

    def ensure_root(self) -> Path:
        self.root.mkdir(parents=True, exist_ok=True)
        return self.root

    def ensure(self, name: str) -> Path:
        """Create the root and an empty tip file if missing. Idempotent.

        An existing file is never truncated.
        """
        self.ensure_root()
        path = self.path_for(name)
        if not path.exists():
            path.touch()
            logger.info("Created tip: %s", path)
        return path
