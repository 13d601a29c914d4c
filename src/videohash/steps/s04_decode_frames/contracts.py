"""I/O contracts for Step 04: Decode selected frames."""

from pathlib import Path
from pydantic import BaseModel, Field


class DecodeFramesInput(BaseModel):
    video_path: Path = Field(..., description="Canonical path of the source video")
    cache_dir: Path = Field(..., description="Directory receiving the frame images")
    indices: list[int] = Field(..., description="Ascending frame indices to extract")
    quiet: bool = Field(False, description="Hide ffmpeg's own diagnostic output")


class DecodeFramesOutput(BaseModel):
    output_pattern: str = Field(..., description="printf-style pattern passed to ffmpeg")
    frame_prefix: str = Field(..., description="Filename prefix of extracted frames")
    frame_ext: str = Field(..., description="Filename extension of extracted frames")
    removed_stale: int = Field(0, description="Frames from earlier runs removed before decoding")
