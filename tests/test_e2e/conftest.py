"""Fixtures for E2E tests against real ffmpeg/ffprobe."""

from __future__ import annotations

import shutil
from pathlib import Path

import numpy as np
import pytest

WIDTH, HEIGHT = 160, 120
BITS = 8
STRIPE = WIDTH // BITS

requires_ffmpeg = pytest.mark.skipif(
    shutil.which("ffmpeg") is None or shutil.which("ffprobe") is None,
    reason="ffmpeg/ffprobe not on PATH",
)


def create_indexed_video(output_dir: Path, num_frames: int, fps: float = 30.0) -> Path:
    """
    Create a video whose frame ``i`` shows ``i`` in binary.

    Each of the 8 vertical stripes is white for a 1 bit and black for a 0
    bit (most significant bit on the left), which survives lossy encoding.
    """
    cv2 = pytest.importorskip("cv2")
    output_dir.mkdir(parents=True, exist_ok=True)
    video_path = output_dir / f"indexed_{num_frames}.mp4"

    fourcc = cv2.VideoWriter_fourcc(*"mp4v")
    writer = cv2.VideoWriter(str(video_path), fourcc, fps, (WIDTH, HEIGHT))
    for i in range(num_frames):
        frame = np.zeros((HEIGHT, WIDTH, 3), dtype=np.uint8)
        for bit in range(BITS):
            if (i >> (BITS - 1 - bit)) & 1:
                frame[:, bit * STRIPE:(bit + 1) * STRIPE] = 255
        writer.write(frame)
    writer.release()
    return video_path


def read_frame_index(image_path: Path) -> int:
    """Decode the index drawn by ``create_indexed_video``."""
    cv2 = pytest.importorskip("cv2")
    img = cv2.imread(str(image_path), cv2.IMREAD_GRAYSCALE)
    assert img is not None, f"unreadable frame {image_path}"
    value = 0
    for bit in range(BITS):
        # sample the stripe centre, away from compression ringing at edges
        stripe = img[:, bit * STRIPE + 4:(bit + 1) * STRIPE - 4]
        value = (value << 1) | int(stripe.mean() > 127)
    return value


@pytest.fixture
def e2e_config(tmp_path: Path) -> Path:
    """Pipeline config keeping the cache inside tmp_path."""
    import yaml

    cache_root = tmp_path / "cache"
    cache_root.mkdir()
    steps_dir = tmp_path / "configs" / "steps"
    steps_dir.mkdir(parents=True)
    with open(steps_dir / "s01_path_cache.yaml", "w") as f:
        yaml.dump({"temp_root": str(cache_root)}, f)
    config_file = tmp_path / "configs" / "pipeline.yaml"
    with open(config_file, "w") as f:
        yaml.dump({
            "project_name": "e2e",
            "steps": [
                {"name": "path_cache", "module": "videohash.steps.s01_path_cache",
                 "config_file": "steps/s01_path_cache.yaml"},
                {"name": "frame_count", "module": "videohash.steps.s02_frame_count"},
                {"name": "index_plan", "module": "videohash.steps.s03_index_plan"},
                {"name": "decode_frames", "module": "videohash.steps.s04_decode_frames"},
                {"name": "collect_frames", "module": "videohash.steps.s05_collect_frames"},
            ],
        }, f)
    return config_file


@pytest.fixture
def video_60(tmp_path: Path) -> Path:
    return create_indexed_video(tmp_path / "videos", 60)


@pytest.fixture
def video_100(tmp_path: Path) -> Path:
    return create_indexed_video(tmp_path / "videos", 100)
