"""I/O contracts for Step 02: Frame count probe."""

from pathlib import Path
from pydantic import BaseModel, Field


class FrameCountInput(BaseModel):
    video_path: Path = Field(..., description="Canonical path of the source video")


class FrameCountOutput(BaseModel):
    total_frames: int = Field(..., ge=0, description="Exact frame count of the primary video stream")
