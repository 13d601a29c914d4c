"""I/O contracts for Step 01: Path to cache directory."""

from pathlib import Path
from pydantic import BaseModel, Field


class PathCacheInput(BaseModel):
    video_path: Path = Field(..., description="Path to the source video, as given")


class PathCacheOutput(BaseModel):
    source_path: Path = Field(..., description="Source path as given")
    video_path: Path = Field(..., description="Canonical absolute path of the source video")
    digest: str = Field(..., description="SHA-256 hex digest of the canonical path")
    cache_dir: Path = Field(..., description="Content-addressed cache directory")
