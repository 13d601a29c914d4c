"""Shared pytest fixtures for videohash tests."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml


class FakeToolkit:
    """Stand-in for ffmpeg/ffprobe.

    ``decode`` writes one dummy image per requested index, minus ``drop``,
    following the printf-style output pattern.
    """

    def __init__(self, total_frames: int = 100, drop: int = 0):
        self.total_frames = total_frames
        self.drop = drop
        self.calls: list[tuple] = []

    def count_frames(self, video_path: Path) -> int:
        self.calls.append(("count_frames", video_path))
        return self.total_frames

    def decode(self, video_path: Path, indices: list[int], output_pattern: str, quiet: bool = False) -> None:
        self.calls.append(("decode", video_path, list(indices), output_pattern, quiet))
        for seq in range(1, len(indices) - self.drop + 1):
            Path(output_pattern % seq).write_bytes(f"frame {indices[seq - 1]}".encode())


@pytest.fixture
def fake_tools() -> FakeToolkit:
    return FakeToolkit(total_frames=100)


@pytest.fixture
def temp_root(tmp_path: Path) -> Path:
    root = tmp_path / "cache_root"
    root.mkdir()
    return root


@pytest.fixture
def video_file(tmp_path: Path) -> Path:
    """A placeholder source file; only its path matters to fake toolkits."""
    path = tmp_path / "videos" / "clip.mp4"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"\x00" * 64)
    return path


@pytest.fixture
def pipeline_config(tmp_path: Path, temp_root: Path) -> Path:
    """pipeline.yaml plus step configs that keep the cache under tmp_path."""
    config_dir = tmp_path / "configs"
    (config_dir / "steps").mkdir(parents=True)
    with open(config_dir / "steps" / "s01_path_cache.yaml", "w") as f:
        yaml.dump({"temp_root": str(temp_root)}, f)

    pipeline = {
        "project_name": "test_project",
        "steps": [
            {"name": "path_cache", "module": "videohash.steps.s01_path_cache",
             "config_file": "steps/s01_path_cache.yaml"},
            {"name": "frame_count", "module": "videohash.steps.s02_frame_count"},
            {"name": "index_plan", "module": "videohash.steps.s03_index_plan"},
            {"name": "decode_frames", "module": "videohash.steps.s04_decode_frames"},
            {"name": "collect_frames", "module": "videohash.steps.s05_collect_frames"},
        ],
    }
    config_file = config_dir / "pipeline.yaml"
    with open(config_file, "w") as f:
        yaml.dump(pipeline, f)
    return config_file


@pytest.fixture
def make_tools():
    """Factory for FakeToolkit with a chosen frame total and dropped output."""
    return FakeToolkit
