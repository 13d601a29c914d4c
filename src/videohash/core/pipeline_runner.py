"""Pipeline orchestrator: runs the extraction steps in order.

Each step's output is merged into a running context dict, and the next
step's input model picks the fields it declares from that context.
"""

from __future__ import annotations

import importlib
import logging
from contextlib import ExitStack
from pathlib import Path

import yaml
from pydantic import BaseModel

from .contracts import ExtractionResult, PipelineConfig, StepEntry, StepMeta, ToolsConfig
from .locks import cache_lock
from .toolkit import VideoToolkit

logger = logging.getLogger(__name__)


def load_pipeline_config(config_path: Path) -> PipelineConfig:
    """Load and validate pipeline.yaml."""
    with open(config_path, encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    return PipelineConfig(**raw)


def load_step_config(config_path: Path, config_class: type[BaseModel]) -> BaseModel:
    """Load a step-specific YAML config into its Pydantic model."""
    with open(config_path, encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    return config_class(**raw)


def import_step_class(module_path: str):
    """Dynamically import a step class from its module path.

    Expects module_path like 'videohash.steps.s01_path_cache'
    and looks for a class ending in 'Step' in that module's step.py.
    """
    step_module = importlib.import_module(f"{module_path}.step")
    for attr_name in dir(step_module):
        attr = getattr(step_module, attr_name)
        if (
            isinstance(attr, type)
            and hasattr(attr, "run")
            and attr_name.endswith("Step")
            and attr_name != "BaseStep"
        ):
            return attr
    raise ImportError(f"No Step class found in {module_path}.step")


def load_entry_config(entry: StepEntry, step_cls, base_dir: Path | None = None) -> BaseModel:
    """Config for one pipeline entry: its YAML file if given, else model defaults.

    Relative config paths are resolved against the pipeline file's directory.
    """
    if not entry.config_file:
        return step_cls.config_type()
    config_path = Path(entry.config_file)
    if base_dir is not None and not config_path.is_absolute():
        config_path = base_dir / config_path
    return load_step_config(config_path, step_cls.config_type)


def build_toolkit(tools_cfg: ToolsConfig) -> VideoToolkit:
    from videohash.utils.ffmpeg import FFmpegToolkit

    return FFmpegToolkit(**tools_cfg.model_dump())


def resolve_pipeline_config(
    config: PipelineConfig | Path | str | None,
) -> tuple[PipelineConfig, Path | None]:
    """Return the config plus the directory step config files are relative to."""
    if config is None:
        return PipelineConfig(), None
    if isinstance(config, PipelineConfig):
        return config, None
    config_path = Path(config)
    return load_pipeline_config(config_path), config_path.parent


def run_extraction(
    video_path: str | Path,
    frame_count: int,
    quiet: bool = False,
    config: PipelineConfig | Path | str | None = None,
    tools: VideoToolkit | None = None,
) -> ExtractionResult:
    """Run every pipeline step and return the full extraction record."""
    from videohash.steps.s03_index_plan._planner import validate_frame_count

    # rejected before touching the filesystem or any external tool
    validate_frame_count(frame_count)

    pipeline_cfg, base_dir = resolve_pipeline_config(config)
    if tools is None:
        tools = build_toolkit(pipeline_cfg.tools)

    context: dict = {
        "video_path": Path(video_path),
        "requested_frames": frame_count,
        "quiet": quiet,
    }
    metas: list[StepMeta] = []
    logger.info(f"Pipeline '{pipeline_cfg.project_name}' with {len(pipeline_cfg.steps)} steps")

    with ExitStack() as stack:
        locked = False
        for entry in pipeline_cfg.steps:
            logger.info(f"--- Step: {entry.name} ---")

            step_cls = import_step_class(entry.module)
            step_config = load_entry_config(entry, step_cls, base_dir)
            step_instance = step_cls(config=step_config, tools=tools)

            step_input = step_cls.input_type(**context)
            output = step_instance.execute(step_input)
            context.update(output.model_dump())
            metas.append(step_instance.meta)

            # one extraction per cache directory at a time
            if not locked and "digest" in context:
                stack.enter_context(cache_lock(context["digest"]))
                locked = True

    result = ExtractionResult(**context, steps=metas)
    logger.info(f"Extracted {len(result.frames)} frames into {result.cache_dir}")
    return result


def extract_exact(
    video_path: str | Path,
    frame_count: int,
    quiet: bool = False,
    config: PipelineConfig | Path | str | None = None,
    tools: VideoToolkit | None = None,
) -> list[Path]:
    """Extract exactly ``frame_count`` evenly spaced frames from a video.

    Returns the frame image paths in ascending source-frame order.
    """
    return run_extraction(video_path, frame_count, quiet=quiet, config=config, tools=tools).frames
