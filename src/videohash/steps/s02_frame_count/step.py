"""Step 02: Count the frames of the primary video stream."""

from __future__ import annotations

import logging
from typing import ClassVar

from videohash.core.errors import ProbeExecutionError
from videohash.core.step_base import BaseStep
from .config import FrameCountConfig
from .contracts import FrameCountInput, FrameCountOutput

logger = logging.getLogger(__name__)


class FrameCountStep(BaseStep[FrameCountInput, FrameCountOutput, FrameCountConfig]):
    name: ClassVar[str] = "frame_count"
    input_type: ClassVar = FrameCountInput
    output_type: ClassVar = FrameCountOutput
    config_type: ClassVar = FrameCountConfig
    input_error: ClassVar = ProbeExecutionError

    def validate_inputs(self, inputs: FrameCountInput) -> bool:
        if self.tools is None:
            logger.error("No video toolkit configured for probing")
            return False
        if not inputs.video_path.is_file():
            logger.error(f"Video not found: {inputs.video_path}")
            return False
        return True

    def run(self, inputs: FrameCountInput) -> FrameCountOutput:
        total = self.tools.count_frames(inputs.video_path)
        logger.info(f"{inputs.video_path.name}: {total} frames")
        return FrameCountOutput(total_frames=total)
