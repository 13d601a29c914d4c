"""Even distribution of N frame indices over a video.

``plan_indices`` is pure. Its output is strictly ascending by construction:
index 0 maps to frame 0, index n-1 to the last frame, and for
``n <= total_frames`` consecutive targets differ by at least
``(total_frames - 1) // (n - 1) >= 1``, so no index repeats.
"""

from __future__ import annotations

from videohash.core.errors import InsufficientFramesError, InvalidFrameCountError


def validate_frame_count(n: int) -> int:
    """Reject anything that is not a positive integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidFrameCountError(f"Frame count must be an integer, got {n!r}")
    if n < 1:
        raise InvalidFrameCountError(f"Frame count must be positive, got {n}")
    return n


def plan_indices(total_frames: int, n: int) -> list[int]:
    """Return ``n`` ascending frame indices spread evenly over ``total_frames``.

    Args:
        total_frames: Frames in the primary video stream.
        n: Number of frames to select.

    Returns:
        ``[total_frames // 2]`` for ``n == 1``, otherwise
        ``floor(i * (total_frames - 1) / (n - 1))`` for ``i`` in ``0..n-1``.

    Raises:
        InvalidFrameCountError: ``n`` is not a positive integer.
        InsufficientFramesError: ``n`` exceeds ``total_frames`` (including an
            empty video).
    """
    validate_frame_count(n)
    if total_frames < 1 or n > total_frames:
        raise InsufficientFramesError(n, max(total_frames, 0))

    if n == 1:
        return [total_frames // 2]

    indices = [i * (total_frames - 1) // (n - 1) for i in range(n)]
    if any(b <= a for a, b in zip(indices, indices[1:])):
        raise AssertionError(f"Planned indices are not strictly ascending: {indices}")
    return indices
