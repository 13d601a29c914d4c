"""Canonical path hashing and cache directory layout."""

from __future__ import annotations

import hashlib
import tempfile
from pathlib import Path

from videohash.core.errors import PathResolutionError

DEFAULT_DIR_PREFIX = "videohash_"


def canonicalize(video_path: str | Path) -> Path:
    """Absolute, symlink-free path of an existing regular file."""
    try:
        canonical = Path(video_path).resolve(strict=True)
    except (OSError, RuntimeError) as e:
        raise PathResolutionError(f"Cannot resolve video path {video_path!s}: {e}") from e
    if not canonical.is_file():
        raise PathResolutionError(f"Not a regular file: {canonical}")
    return canonical


def path_digest(canonical: Path) -> str:
    try:
        raw = str(canonical).encode("utf-8")
    except UnicodeEncodeError as e:
        raise PathResolutionError(f"Video path is not valid UTF-8: {canonical!r}") from e
    return hashlib.sha256(raw).hexdigest()


def cache_dir_for(
    digest: str, temp_root: Path | None = None, dir_prefix: str = DEFAULT_DIR_PREFIX
) -> Path:
    root = Path(temp_root) if temp_root is not None else Path(tempfile.gettempdir())
    return root / f"{dir_prefix}{digest}"


def ensure_cache_dir(cache_dir: Path) -> Path:
    # exist_ok: a concurrent creator winning the race is still success
    try:
        cache_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise PathResolutionError(f"Cannot create cache directory {cache_dir}: {e}") from e
    return cache_dir
