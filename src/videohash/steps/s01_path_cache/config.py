"""Configuration for Step 01: Path to cache directory."""

from pathlib import Path

from pydantic import BaseModel, Field


class PathCacheConfig(BaseModel):
    temp_root: Path | None = Field(None, description="Cache parent directory (None = system temp dir)")
    dir_prefix: str = Field("videohash_", description="Prefix of the per-video cache directory name")
