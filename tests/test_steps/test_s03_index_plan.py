"""Tests for S03: Frame index planning."""

import pytest

from videohash.core.errors import InsufficientFramesError, InvalidFrameCountError
from videohash.steps.s03_index_plan._planner import plan_indices, validate_frame_count
from videohash.steps.s03_index_plan.config import IndexPlanConfig
from videohash.steps.s03_index_plan.contracts import IndexPlanInput
from videohash.steps.s03_index_plan.step import IndexPlanStep


class TestPlanIndices:
    def test_hundred_frames_five_targets(self):
        assert plan_indices(100, 5) == [0, 24, 49, 74, 99]

    def test_single_frame_is_midpoint(self):
        assert plan_indices(60, 1) == [30]
        assert plan_indices(61, 1) == [30]
        assert plan_indices(1, 1) == [0]
        assert plan_indices(2, 1) == [1]

    def test_two_frames_are_ends(self):
        assert plan_indices(10, 2) == [0, 9]

    def test_all_frames(self):
        assert plan_indices(7, 7) == list(range(7))

    def test_properties_over_small_videos(self):
        for total in range(1, 80):
            for n in range(1, total + 1):
                indices = plan_indices(total, n)
                assert len(indices) == n
                assert all(0 <= i < total for i in indices)
                assert all(b > a for a, b in zip(indices, indices[1:]))
                if n == 1:
                    assert indices == [total // 2]
                else:
                    assert indices[0] == 0
                    assert indices[-1] == total - 1

    def test_near_equal_ratio_has_no_duplicates(self):
        for total, n in [(100, 99), (1000, 999), (3, 2), (5, 4)]:
            indices = plan_indices(total, n)
            assert len(set(indices)) == n

    def test_more_frames_than_available(self):
        with pytest.raises(InsufficientFramesError) as exc_info:
            plan_indices(4, 5)
        assert exc_info.value.requested == 5
        assert exc_info.value.available == 4

    def test_empty_video(self):
        with pytest.raises(InsufficientFramesError):
            plan_indices(0, 1)

    def test_zero_requested(self):
        with pytest.raises(InvalidFrameCountError):
            plan_indices(100, 0)

    def test_invalid_frame_count_is_value_error(self):
        with pytest.raises(ValueError):
            validate_frame_count(-1)

    def test_bool_is_not_a_count(self):
        with pytest.raises(InvalidFrameCountError):
            validate_frame_count(True)


class TestIndexPlanStep:
    def test_execute(self):
        step = IndexPlanStep(config=IndexPlanConfig())
        out = step.execute(IndexPlanInput(total_frames=100, requested_frames=5))
        assert out.indices == [0, 24, 49, 74, 99]
        assert out.expected_count == 5
        assert step.meta.step_name == "index_plan"

    def test_large_plan(self):
        step = IndexPlanStep(config=IndexPlanConfig())
        out = step.execute(IndexPlanInput(total_frames=10_000, requested_frames=500))
        assert out.expected_count == 500
        assert out.indices[-1] == 9_999

    def test_rejects_zero(self):
        step = IndexPlanStep(config=IndexPlanConfig())
        inp = IndexPlanInput(total_frames=100, requested_frames=0)
        assert step.validate_inputs(inp) is False
        with pytest.raises(InvalidFrameCountError):
            step.execute(inp)
