"""videohash core: pipeline runner, base step, shared contracts."""

from .step_base import BaseStep
from .contracts import ExtractionResult, PipelineConfig, StepEntry, StepMeta, ToolsConfig
from .pipeline_runner import extract_exact, load_pipeline_config, run_extraction
from .logging import setup_logging

__all__ = [
    "BaseStep",
    "ExtractionResult",
    "PipelineConfig",
    "StepEntry",
    "StepMeta",
    "ToolsConfig",
    "extract_exact",
    "run_extraction",
    "load_pipeline_config",
    "setup_logging",
]
