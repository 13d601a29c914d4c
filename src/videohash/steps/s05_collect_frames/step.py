"""Step 05: Gather extracted frames and check that none are missing."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import ClassVar

from videohash.core.errors import CacheDirectoryError, CountMismatchError
from videohash.core.step_base import BaseStep
from .config import CollectFramesConfig
from .contracts import CollectFramesInput, CollectFramesOutput

logger = logging.getLogger(__name__)


def _sequence_key(name: str, prefix: str, suffix: str) -> tuple:
    seq = name[len(prefix):-len(suffix)]
    if seq.isdigit():
        return (0, int(seq), name)
    return (1, 0, name)


def list_frames(cache_dir: Path, prefix: str, ext: str, require_numeric: bool = True) -> list[Path]:
    """Frame files in ``cache_dir``, sorted by sequence number."""
    suffix = f".{ext}"
    frames = []
    for path in cache_dir.iterdir():
        name = path.name
        if not (name.startswith(prefix) and name.endswith(suffix)) or not path.is_file():
            continue
        if require_numeric and not name[len(prefix):-len(suffix)].isdigit():
            continue
        frames.append(path)
    return sorted(frames, key=lambda p: _sequence_key(p.name, prefix, suffix))


class CollectFramesStep(BaseStep[CollectFramesInput, CollectFramesOutput, CollectFramesConfig]):
    name: ClassVar[str] = "collect_frames"
    input_type: ClassVar = CollectFramesInput
    output_type: ClassVar = CollectFramesOutput
    config_type: ClassVar = CollectFramesConfig
    input_error: ClassVar = CacheDirectoryError

    def validate_inputs(self, inputs: CollectFramesInput) -> bool:
        if not inputs.cache_dir.is_dir():
            logger.error(f"Cache directory not found: {inputs.cache_dir}")
            return False
        return True

    def run(self, inputs: CollectFramesInput) -> CollectFramesOutput:
        frames = list_frames(
            inputs.cache_dir, inputs.frame_prefix, inputs.frame_ext, self.config.require_numeric
        )
        if len(frames) != inputs.expected_count:
            logger.error(
                f"Frame count mismatch in {inputs.cache_dir}: "
                f"expected {inputs.expected_count}, found {len(frames)}"
            )
            raise CountMismatchError(inputs.expected_count, len(frames))
        logger.info(f"Collected {len(frames)} frames")
        return CollectFramesOutput(frames=frames)
