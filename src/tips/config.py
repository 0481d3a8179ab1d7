"""Configuration loading from environment variables and tips.toml."""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

logger = logging.getLogger(__name__)

_CONFIG_FILENAME = "tips.toml"
_DEFAULT_TIPS_SUBDIR = Path(".config") / "himkt" / "dotfiles" / "tips"
_DEFAULT_EDITOR = "vim"

DECODE_ERROR_POLICIES = ("skip", "warn", "fail")
_TRUTHY = ("1", "true", "yes", "on")


class ConfigError(Exception):
    """Raised when the configuration cannot be resolved."""


@dataclass
class TipsConfig:
    """Resolved settings for one tips invocation."""

    home: Path
    editor: str = _DEFAULT_EDITOR
    sort_names: bool = False
    on_decode_error: str = "skip"
    log_level: str = "WARNING"


def resolve_home(environ: Mapping[str, str] | None = None) -> Path:
    """Return the tips directory.

    ``TIPS_HOME`` wins whenever it is set, even to an empty string.
    Otherwise the directory lives under ``$HOME``; a missing ``HOME`` is a
    ConfigError. The path is not checked for existence.
    """
    env = os.environ if environ is None else environ
    if "TIPS_HOME" in env:
        return Path(env["TIPS_HOME"])

    try:
        home = env["HOME"]
    except KeyError:
        raise ConfigError("HOME is not set and TIPS_HOME was not given") from None
    return Path(home) / _DEFAULT_TIPS_SUBDIR


def _find_config_file(env: Mapping[str, str]) -> Path | None:
    candidates = []
    if env.get("TIPS_CONFIG"):
        candidates.append(Path(env["TIPS_CONFIG"]))
    if env.get("HOME"):
        candidates.append(Path(env["HOME"]) / ".config" / "tips" / _CONFIG_FILENAME)
    for candidate in candidates:
        if candidate.exists():
            return candidate
    return None


def _as_bool(value: object) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUTHY


def load_config(
    config_path: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> TipsConfig:
    """Load configuration from environment variables and optional tips.toml.

    Priority: environment variables > tips.toml > defaults.
    """
    env = os.environ if environ is None else environ

    file_data: dict = {}
    path = config_path if config_path is not None else _find_config_file(env)
    if path is not None and path.exists():
        try:
            file_data = tomllib.loads(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
            raise ConfigError(f"Invalid config file {path}: {e}") from e
        logger.debug("Loaded config file: %s", path)

    # An empty EDITOR counts as unset
    editor = env.get("EDITOR") or file_data.get("editor") or _DEFAULT_EDITOR
    if not isinstance(editor, str):
        raise ConfigError(f"editor must be a program name, got {editor!r}")

    on_decode_error = str(
        env.get("TIPS_ON_DECODE_ERROR", file_data.get("on_decode_error", "skip"))
    ).lower()
    if on_decode_error not in DECODE_ERROR_POLICIES:
        raise ConfigError(
            f"on_decode_error must be one of {', '.join(DECODE_ERROR_POLICIES)}, "
            f"got {on_decode_error!r}"
        )

    log_level = env.get("TIPS_LOG_LEVEL", file_data.get("log_level", "WARNING"))
    if not isinstance(log_level, str):
        raise ConfigError(f"log_level must be a level name, got {log_level!r}")

    config = TipsConfig(
        home=resolve_home(env),
        editor=editor,
        sort_names=_as_bool(env.get("TIPS_SORT", file_data.get("sort_names", False))),
        on_decode_error=on_decode_error,
        log_level=log_level,
    )
    logger.debug("Tips home: %s", config.home)
    return config
