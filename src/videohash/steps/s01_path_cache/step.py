"""Step 01: Resolve the source video and derive its cache directory."""

from __future__ import annotations

import logging
from typing import ClassVar

from videohash.core.errors import PathResolutionError
from videohash.core.step_base import BaseStep
from ._cache import cache_dir_for, canonicalize, ensure_cache_dir, path_digest
from .config import PathCacheConfig
from .contracts import PathCacheInput, PathCacheOutput

logger = logging.getLogger(__name__)


class PathCacheStep(BaseStep[PathCacheInput, PathCacheOutput, PathCacheConfig]):
    name: ClassVar[str] = "path_cache"
    input_type: ClassVar = PathCacheInput
    output_type: ClassVar = PathCacheOutput
    config_type: ClassVar = PathCacheConfig
    input_error: ClassVar = PathResolutionError

    def validate_inputs(self, inputs: PathCacheInput) -> bool:
        if not inputs.video_path.exists():
            logger.error(f"Video not found: {inputs.video_path}")
            return False
        return True

    def run(self, inputs: PathCacheInput) -> PathCacheOutput:
        canonical = canonicalize(inputs.video_path)
        digest = path_digest(canonical)
        cache_dir = ensure_cache_dir(
            cache_dir_for(digest, self.config.temp_root, self.config.dir_prefix)
        )
        logger.info(f"Cache directory for {canonical.name}: {cache_dir}")
        return PathCacheOutput(
            source_path=inputs.video_path,
            video_path=canonical,
            digest=digest,
            cache_dir=cache_dir,
        )
