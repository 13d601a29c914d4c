"""Narrow interface to the external probe/decode capability."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class VideoToolkit(Protocol):
    def count_frames(self, video_path: Path) -> int:
        """Exact number of frames in the primary video stream."""
        ...

    def decode(
        self, video_path: Path, indices: list[int], output_pattern: str, quiet: bool = False
    ) -> None:
        """Write the frames at ``indices`` to files matching ``output_pattern``."""
        ...
