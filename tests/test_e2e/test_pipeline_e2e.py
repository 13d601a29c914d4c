"""End-to-end extraction with real ffmpeg/ffprobe on synthetic videos."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from videohash import (
    InsufficientFramesError,
    InvalidFrameCountError,
    extract_exact,
    run_extraction,
    sample_every,
)
from videohash.utils.ffmpeg import FFmpegToolkit

from .conftest import read_frame_index, requires_ffmpeg

logger = logging.getLogger(__name__)

pytestmark = [pytest.mark.e2e, requires_ffmpeg]


def test_probe_counts_exact_frames(video_100: Path):
    assert FFmpegToolkit().count_frames(video_100) == 100


def test_single_frame_is_midpoint(video_60: Path, e2e_config: Path):
    frames = extract_exact(video_60, 1, quiet=True, config=e2e_config)
    assert len(frames) == 1
    assert read_frame_index(frames[0]) == 30


def test_five_frames_of_hundred(video_100: Path, e2e_config: Path):
    result = run_extraction(video_100, 5, quiet=True, config=e2e_config)

    assert result.total_frames == 100
    assert result.indices == [0, 24, 49, 74, 99]
    assert [p.name for p in result.frames] == [f"frame_{i:04d}.png" for i in range(1, 6)]
    decoded = [read_frame_index(p) for p in result.frames]
    logger.info(f"Decoded frame indices: {decoded}")
    assert decoded == result.indices


def test_every_frame(video_60: Path, e2e_config: Path):
    result = run_extraction(video_60, 60, quiet=True, config=e2e_config)
    assert [read_frame_index(p) for p in result.frames] == list(range(60))


def test_repeat_reuses_cache_dir(video_60: Path, e2e_config: Path):
    first = run_extraction(video_60, 6, quiet=True, config=e2e_config)
    second = run_extraction(video_60, 3, quiet=True, config=e2e_config)
    assert first.cache_dir == second.cache_dir
    assert [read_frame_index(p) for p in second.frames] == second.indices == [0, 29, 59]


def test_too_many_frames(video_60: Path, e2e_config: Path):
    with pytest.raises(InsufficientFramesError):
        extract_exact(video_60, 61, quiet=True, config=e2e_config)


def test_zero_frames(video_60: Path, e2e_config: Path):
    with pytest.raises(InvalidFrameCountError):
        extract_exact(video_60, 0, quiet=True, config=e2e_config)


def test_sample_every(video_60: Path, tmp_path: Path):
    out_dir = tmp_path / "samples"
    saved = sample_every(video_60, 20, output_dir=out_dir)
    assert [p.name for p in saved] == ["sample_0000.png", "sample_0001.png", "sample_0002.png"]
    assert [read_frame_index(p) for p in saved] == [0, 20, 40]


def test_samples_do_not_disturb_extraction(video_60: Path, e2e_config: Path):
    result = run_extraction(video_60, 2, quiet=True, config=e2e_config)
    sample_every(video_60, 10, output_dir=result.cache_dir)
    again = run_extraction(video_60, 2, quiet=True, config=e2e_config)
    assert len(again.frames) == 2
