"""Common Pydantic models shared across pipeline steps."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field


class StepMeta(BaseModel):
    """Metadata attached to every step run for reproducibility."""

    step_name: str
    elapsed_seconds: float = 0.0
    params: dict[str, Any] = Field(default_factory=dict)


class StepEntry(BaseModel):
    """One entry in the pipeline step list."""

    name: str
    module: str
    config_file: str | None = None


class ToolsConfig(BaseModel):
    """External ffmpeg/ffprobe binaries."""

    ffmpeg: str = Field("ffmpeg", description="ffmpeg executable name or path")
    ffprobe: str = Field("ffprobe", description="ffprobe executable name or path")
    timeout: float | None = Field(None, description="Per-invocation timeout in seconds (None = wait)")
    vfr_option: Literal["-vsync", "-fps_mode"] = Field(
        "-vsync", description="ffmpeg option used to request variable output rate"
    )


def default_steps() -> list[StepEntry]:
    return [
        StepEntry(name="path_cache", module="videohash.steps.s01_path_cache"),
        StepEntry(name="frame_count", module="videohash.steps.s02_frame_count"),
        StepEntry(name="index_plan", module="videohash.steps.s03_index_plan"),
        StepEntry(name="decode_frames", module="videohash.steps.s04_decode_frames"),
        StepEntry(name="collect_frames", module="videohash.steps.s05_collect_frames"),
    ]


class PipelineConfig(BaseModel):
    """Top-level pipeline configuration loaded from pipeline.yaml."""

    project_name: str = "videohash"
    tools: ToolsConfig = Field(default_factory=ToolsConfig)
    steps: list[StepEntry] = Field(default_factory=default_steps)


class ExtractionResult(BaseModel):
    """Everything a finished extraction produced.

    ``frames[i]`` is the image of source frame ``indices[i]``.
    """

    source_path: Path
    video_path: Path
    cache_dir: Path
    digest: str
    total_frames: int
    indices: list[int]
    frames: list[Path]
    steps: list[StepMeta] = Field(default_factory=list)
