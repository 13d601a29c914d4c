"""Configuration for Step 04: Decode selected frames."""

from typing import Literal

from pydantic import BaseModel, Field


class DecodeFramesConfig(BaseModel):
    output_format: Literal["png", "jpg"] = Field("png", description="Frame image format")
    filename_prefix: str = Field("frame_", description="Prefix of extracted frame filenames")
    index_width: int = Field(4, ge=4, description="Zero-padded width of the frame sequence number")
    clear_stale: bool = Field(True, description="Remove frames left by earlier runs before decoding")
