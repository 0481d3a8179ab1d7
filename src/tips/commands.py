"""The ``list`` and ``edit`` operations.

Both take the resolved TipsConfig explicitly and report through the given
streams. Failures are reported where they happen and never change the exit
status; only configuration problems are fatal, and those are raised before
a command runs.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from tips.config import TipsConfig
from tips.editor import Editor, editor_from_config
from tips.store import TipDecodeError, TipStore

logger = logging.getLogger(__name__)


def list_tips(
    config: TipsConfig,
    name: str | None = None,
    query: str | None = None,
    *,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> None:
    """Print tip names, or the lines of one tip, optionally filtered."""
    out = out or sys.stdout
    err = err or sys.stderr
    store = TipStore(config.home)

    if name is None:
        _list_names(store, config, query, out, err)
    else:
        _list_lines(store, config, name, query, out, err)


def _list_names(
    store: TipStore, config: TipsConfig, query: str | None, out: TextIO, err: TextIO
) -> None:
    try:
        names = store.names(query)
        if config.sort_names:
            names = iter(sorted(names))
        for tip_name in names:
            print(tip_name, file=out)
    except OSError as e:
        logger.debug("Cannot open %s: %s", store.root, e)
        print(f"No tips.d found on {store.root}", file=err)


def _list_lines(
    store: TipStore,
    config: TipsConfig,
    name: str,
    query: str | None,
    out: TextIO,
    err: TextIO,
) -> None:
    if not store.exists(name):
        print(f"No tips available for {name}", file=out)
        return

    try:
        lines = store.lines(name, query, on_decode_error=config.on_decode_error)
    except OSError as e:
        print(f"Cannot open file: {e}", file=err)
        return

    try:
        for line in lines:
            print(line, file=out)
    except (OSError, TipDecodeError) as e:
        print(f"Cannot read file: {e}", file=err)


def edit_tips(
    config: TipsConfig,
    name: str,
    init: bool = False,
    *,
    editor: Editor | None = None,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> None:
    """Open a tip in the editor, creating it first when ``init`` is set."""
    out = out or sys.stdout
    err = err or sys.stderr
    store = TipStore(config.home)
    path = store.path_for(name)

    if init:
        try:
            store.ensure_root()
        except OSError as e:
            print(f"Cannot create directory {store.root}: {e}", file=err)
            return
        try:
            store.ensure(name)
        except OSError as e:
            print(f"Cannot create file {path}: {e}", file=err)
            return

    editor = editor or editor_from_config(config)
    try:
        status = editor.run(path)
    except OSError as e:
        print(f"Failed to start editor process: {e}", file=err)
        return

    if status == 0:
        print(f"Tips for {name} updated.", file=out)
    else:
        print("Cancelled.", file=out)
