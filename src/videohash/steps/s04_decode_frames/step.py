"""Step 04: Extract exactly the planned frames in one decoder pass."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import ClassVar

from videohash.core.errors import DecodeExecutionError
from videohash.core.step_base import BaseStep
from .config import DecodeFramesConfig
from .contracts import DecodeFramesInput, DecodeFramesOutput

logger = logging.getLogger(__name__)


def frame_pattern(cache_dir: Path, prefix: str, width: int, ext: str) -> str:
    """``<cache_dir>/frame_%04d.png``: fixed width keeps name order == frame order."""
    return str(cache_dir / f"{prefix}%0{width}d.{ext}")


def clear_stale_frames(cache_dir: Path, prefix: str, ext: str) -> int:
    removed = 0
    for path in cache_dir.glob(f"{prefix}*.{ext}"):
        if path.is_file():
            path.unlink()
            removed += 1
    return removed


class DecodeFramesStep(BaseStep[DecodeFramesInput, DecodeFramesOutput, DecodeFramesConfig]):
    name: ClassVar[str] = "decode_frames"
    input_type: ClassVar = DecodeFramesInput
    output_type: ClassVar = DecodeFramesOutput
    config_type: ClassVar = DecodeFramesConfig
    input_error: ClassVar = DecodeExecutionError

    def validate_inputs(self, inputs: DecodeFramesInput) -> bool:
        if self.tools is None:
            logger.error("No video toolkit configured for decoding")
            return False
        if not inputs.cache_dir.is_dir():
            logger.error(f"Cache directory not found: {inputs.cache_dir}")
            return False
        if not inputs.indices:
            logger.error("No frame indices to extract")
            return False
        if any(b <= a for a, b in zip(inputs.indices, inputs.indices[1:])):
            logger.error("Frame indices must be strictly ascending")
            return False
        return True

    def run(self, inputs: DecodeFramesInput) -> DecodeFramesOutput:
        cfg = self.config
        removed = 0
        if cfg.clear_stale:
            removed = clear_stale_frames(inputs.cache_dir, cfg.filename_prefix, cfg.output_format)
            if removed:
                logger.info(f"Removed {removed} stale frames from {inputs.cache_dir}")

        # wide enough for the last sequence number, so name order stays frame order
        width = max(cfg.index_width, len(str(len(inputs.indices))))
        pattern = frame_pattern(inputs.cache_dir, cfg.filename_prefix, width, cfg.output_format)
        logger.info(f"Decoding {len(inputs.indices)} frames -> {pattern}")
        self.tools.decode(inputs.video_path, inputs.indices, pattern, quiet=inputs.quiet)

        return DecodeFramesOutput(
            output_pattern=pattern,
            frame_prefix=cfg.filename_prefix,
            frame_ext=cfg.output_format,
            removed_stale=removed,
        )
