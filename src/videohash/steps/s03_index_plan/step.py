"""Step 03: Plan which frame indices to extract."""

from __future__ import annotations

import logging
from typing import ClassVar

from videohash.core.errors import InvalidFrameCountError
from videohash.core.step_base import BaseStep
from ._planner import plan_indices
from .config import IndexPlanConfig
from .contracts import IndexPlanInput, IndexPlanOutput

logger = logging.getLogger(__name__)


class IndexPlanStep(BaseStep[IndexPlanInput, IndexPlanOutput, IndexPlanConfig]):
    name: ClassVar[str] = "index_plan"
    input_type: ClassVar = IndexPlanInput
    output_type: ClassVar = IndexPlanOutput
    config_type: ClassVar = IndexPlanConfig
    input_error: ClassVar = InvalidFrameCountError

    def validate_inputs(self, inputs: IndexPlanInput) -> bool:
        if inputs.requested_frames < 1:
            logger.error(f"Requested frame count must be positive, got {inputs.requested_frames}")
            return False
        return True

    def run(self, inputs: IndexPlanInput) -> IndexPlanOutput:
        indices = plan_indices(inputs.total_frames, inputs.requested_frames)
        if len(indices) <= 10:
            logger.info(f"Planned indices: {indices}")
        else:
            logger.info(f"Planned {len(indices)} indices: {indices[0]}..{indices[-1]}")
        return IndexPlanOutput(indices=indices, expected_count=len(indices))
