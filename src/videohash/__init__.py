"""Deterministic, evenly spaced frame extraction with a content-addressed cache."""

from videohash.core.contracts import ExtractionResult, PipelineConfig
from videohash.core.errors import (
    CacheDirectoryError,
    CountMismatchError,
    DecodeExecutionError,
    InsufficientFramesError,
    InvalidFrameCountError,
    PathResolutionError,
    ProbeExecutionError,
    ProbeParseError,
    VideoHashError,
)
from videohash.core.pipeline_runner import extract_exact, run_extraction
from videohash.sampling import sample_every
from videohash.steps.s03_index_plan._planner import plan_indices

__version__ = "0.1.0"

__all__ = [
    "CacheDirectoryError",
    "CountMismatchError",
    "DecodeExecutionError",
    "ExtractionResult",
    "InsufficientFramesError",
    "InvalidFrameCountError",
    "PathResolutionError",
    "PipelineConfig",
    "ProbeExecutionError",
    "ProbeParseError",
    "VideoHashError",
    "extract_exact",
    "plan_indices",
    "run_extraction",
    "sample_every",
]
