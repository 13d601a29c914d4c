"""I/O contracts for Step 05: Collect extracted frames."""

from pathlib import Path
from pydantic import BaseModel, Field


class CollectFramesInput(BaseModel):
    cache_dir: Path = Field(..., description="Directory holding extracted frames")
    expected_count: int = Field(..., description="Number of frames the decoder had to produce")
    frame_prefix: str = Field("frame_", description="Filename prefix of extracted frames")
    frame_ext: str = Field("png", description="Filename extension of extracted frames")


class CollectFramesOutput(BaseModel):
    frames: list[Path] = Field(..., description="Extracted frame paths in ascending frame order")
