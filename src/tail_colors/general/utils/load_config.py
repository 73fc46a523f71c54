# src/tail_colors/general/utils/load_config.py

"""Read the tail_colors JSON document from a <data/> directory.

Does: Locate the data dir, refuse paths outside it, parse JSON (or JSON5 with
      `allow_comments=True`) and hand the object to a validator.
Returns: The validator's result, or the parsed document when no validator is given.
Used by: vocab.load_tail_config (builds a TailConfig from the document).

Parsed documents are cached per (path, mtime, encoding, allow_comments); the
validator runs on every call, so each load still yields a fresh TailConfig.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from collections.abc import Callable
from pathlib import Path
from typing import Any

import json5

# ── Public surface ────────────────────────────────────────────────────────────
DATA_DIR_ENV_VARS: tuple[str, ...] = ("TAIL_COLORS_DATA_DIR", "DATA_DIR")

__all__ = [
    "load_config",
    "clear_config_cache",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]


# ── Exceptions ───────────────────────────────────────────────────────────────
class DataDirNotFound(FileNotFoundError):
    """Raise when no 'data' directory is found while walking upwards."""


class ConfigFileNotFound(FileNotFoundError):
    """Raise when the requested config file cannot be read or resolved."""


class ConfigParseError(ValueError):
    """Raise when parsing or validation fails for a config file."""


class ConfigTypeError(TypeError):
    """Raise when the parsed document doesn't match the expected structure."""


# ── Logging & cache ──────────────────────────────────────────────────────────
log = logging.getLogger(__name__)
_CACHE_LOCK = threading.RLock()
# cache key: path, mtime, encoding, allow_comments -> parsed document
_CONFIG_CACHE: dict[tuple[Path, float, str, bool], Any] = {}


def clear_config_cache() -> None:
    """Empty the parsed-document cache (tests, hot reload)."""
    with _CACHE_LOCK:
        _CONFIG_CACHE.clear()
        log.debug("Config cache cleared.")


# ── Data dir discovery ───────────────────────────────────────────────────────
def _candidate_data_dirs(start: Path | None = None) -> list[Path]:
    start = (start or Path(__file__)).resolve()
    return [(p / name).resolve() for p in [start, *start.parents] for name in ("data", "Data")]


def _default_data_dir(start: Path | None = None) -> Path:
    """Return the first existing candidate directory or raise."""
    for cand in _candidate_data_dirs(start):
        if cand.is_dir():
            return cand
    raise DataDirNotFound(
        "No 'data' directory found.\n"
        "Tried:\n  " + "\n  ".join(str(p) for p in _candidate_data_dirs(start))
    )


def _env_data_dir() -> Path | None:
    for var in DATA_DIR_ENV_VARS:
        v = os.environ.get(var)
        if v:
            return Path(os.path.expanduser(v)).resolve()
    return None


def _resolve_path(file: str | os.PathLike[str], base_dir: Path | None) -> Path:
    # explicit > env override > discovery
    if base_dir is None:
        base_dir = _env_data_dir() or _default_data_dir()
    data_dir = Path(base_dir).resolve()

    file_str = os.fspath(file)
    file_name = file_str if file_str.endswith(".json") else f"{file_str}.json"
    path = (data_dir / file_name).resolve()
    try:
        path.relative_to(data_dir)
    except ValueError as e:
        raise ConfigFileNotFound(
            f"Refusing to access file outside data dir: {path} (base={data_dir})"
        ) from e

    if not path.is_file():
        raise ConfigFileNotFound(f"Config file not found: {path}")
    return path


# ── Parsing ──────────────────────────────────────────────────────────────────
def _parse(path: Path, encoding: str, allow_comments: bool) -> Any:
    try:
        text = path.read_text(encoding=encoding, errors="strict")
    except UnicodeDecodeError as e:
        raise ConfigParseError(f"Cannot decode {path} as {encoding}: {e}") from e
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e

    if allow_comments:
        try:
            return json5.loads(text)  # comments + trailing commas
        except ValueError as e:
            raise ConfigParseError(f"Invalid JSON5 in {path}: {e}") from e
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"Invalid JSON in {path}: {e}") from e


def _read_cached(path: Path, encoding: str, allow_comments: bool) -> Any:
    try:
        mtime = path.stat().st_mtime
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot stat {path}: {e}") from e

    cache_key = (path, mtime, encoding, allow_comments)
    with _CACHE_LOCK:
        if cache_key in _CONFIG_CACHE:
            log.debug("Config cache HIT: %s", path.name)
            return _CONFIG_CACHE[cache_key]

    data = _parse(path, encoding, allow_comments)
    with _CACHE_LOCK:
        _CONFIG_CACHE[cache_key] = data
    log.debug("Config cache MISS → STORED: %s", path.name)
    return data


def load_config(
    file: str | os.PathLike[str],
    *,
    base_dir: Path | None = None,
    validator: Callable[[dict[str, Any]], Any] | None = None,
    allow_comments: bool = False,
    encoding: str = "utf-8",
) -> Any:
    """
    Does: Load <data>/<file>.json and run `validator` over the top-level object.
    Returns: validator(document), or the parsed document when no validator is given.
    Raises: ConfigTypeError when a validator is given and the document is not an
            object; ConfigParseError when parsing or the validator fails.
    """
    path = _resolve_path(file, base_dir)
    data = _read_cached(path, encoding, allow_comments)
    if validator is None:
        return data

    if not isinstance(data, dict):
        raise ConfigTypeError(f"{path.name}: expected an object, got {type(data).__name__}")
    try:
        # shallow copy keeps the cached document intact
        return validator(dict(data))
    except (ConfigTypeError, ConfigParseError):
        raise
    except Exception as e:
        raise ConfigParseError(f"{path.name}: validator failed: {e}") from e
