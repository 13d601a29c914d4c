"""Configuration for Step 02: Frame count probe."""

from pydantic import BaseModel


class FrameCountConfig(BaseModel):
    """No tunables: the probe always tallies packets of stream v:0 exactly."""
