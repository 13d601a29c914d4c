"""Typed failures raised by the extraction pipeline.

Every stage fails fast with one of these; nothing is retried.
"""

from __future__ import annotations


class VideoHashError(Exception):
    """Base class for all pipeline failures."""


class InvalidFrameCountError(VideoHashError, ValueError):
    """Requested frame count is not a positive integer."""


class PathResolutionError(VideoHashError):
    """Source file is missing or its path cannot be canonicalized."""


class ProbeExecutionError(VideoHashError):
    """ffprobe could not run, failed, or found no video stream."""


class ProbeParseError(VideoHashError):
    """ffprobe output was not UTF-8 or not a single integer."""


class InsufficientFramesError(VideoHashError):
    """More frames requested than the video contains."""

    def __init__(self, requested: int, available: int):
        self.requested = requested
        self.available = available
        super().__init__(
            f"Requested {requested} frames but the video has only {available}"
        )


class DecodeExecutionError(VideoHashError):
    """ffmpeg could not run or exited with a failure status."""


class CacheDirectoryError(VideoHashError):
    """The cache directory holding extracted frames is missing."""


class CountMismatchError(VideoHashError):
    """The decoder produced a different number of frames than planned."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected {expected} extracted frames, found {actual}")
