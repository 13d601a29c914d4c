"""Configuration for Step 05: Collect extracted frames."""

from pydantic import BaseModel, Field


class CollectFramesConfig(BaseModel):
    require_numeric: bool = Field(
        True, description="Only accept names whose part between prefix and extension is digits"
    )
