"""I/O contracts for Step 03: Frame index planning."""

from pydantic import BaseModel, Field


class IndexPlanInput(BaseModel):
    total_frames: int = Field(..., description="Frames available in the video")
    requested_frames: int = Field(..., description="Number of frames to select (N)")


class IndexPlanOutput(BaseModel):
    indices: list[int] = Field(..., description="Strictly ascending frame indices, length N")
    expected_count: int = Field(..., description="Number of frames the decoder must produce")
