"""Interval sampling: keep every k-th decoded frame.

Unlike the index pipeline this decodes the whole stream in-process and never
probes the frame count, so the number of frames it writes depends on how many
frames OpenCV manages to read.
"""

from __future__ import annotations

import logging
from pathlib import Path

from videohash.core.errors import DecodeExecutionError, InvalidFrameCountError
from videohash.steps.s01_path_cache._cache import (
    cache_dir_for,
    canonicalize,
    ensure_cache_dir,
    path_digest,
)

logger = logging.getLogger(__name__)

SAMPLE_PREFIX = "sample_"


def sample_every(
    video_path: str | Path,
    every_n: int,
    output_dir: Path | None = None,
    max_frames: int | None = None,
    output_format: str = "png",
) -> list[Path]:
    """Save every ``every_n``-th frame of the video.

    Frames go to ``output_dir``, or the video's cache directory when omitted,
    as ``sample_0000.png``, ``sample_0001.png``, ... Returns the saved paths in
    decode order.
    """
    import cv2

    if isinstance(every_n, bool) or not isinstance(every_n, int) or every_n < 1:
        raise InvalidFrameCountError(f"Sampling interval must be a positive integer, got {every_n!r}")

    canonical = canonicalize(video_path)
    if output_dir is None:
        output_dir = cache_dir_for(path_digest(canonical))
    output_dir = ensure_cache_dir(Path(output_dir))

    cap = cv2.VideoCapture(str(canonical))
    if not cap.isOpened():
        raise DecodeExecutionError(f"Failed to open video for sampling: {canonical}")

    saved: list[Path] = []
    frame_idx = 0
    try:
        while max_frames is None or len(saved) < max_frames:
            ok, frame = cap.read()
            if not ok or frame is None:
                break
            if frame_idx % every_n == 0:
                out_path = output_dir / f"{SAMPLE_PREFIX}{len(saved):04d}.{output_format}"
                if not cv2.imwrite(str(out_path), frame):
                    raise DecodeExecutionError(f"Failed to write {out_path}")
                saved.append(out_path)
            frame_idx += 1
    finally:
        cap.release()

    logger.info(f"Sampled {len(saved)} frames from {frame_idx} decoded (every {every_n})")
    return saved
