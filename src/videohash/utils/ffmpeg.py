"""ffmpeg/ffprobe implementation of the VideoToolkit interface."""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path

from videohash.core.errors import (
    DecodeExecutionError,
    ProbeExecutionError,
    ProbeParseError,
)
from videohash.utils.subprocess_utils import tail_output, run_command

logger = logging.getLogger(__name__)


def resolve_binary(name: str) -> str:
    """Resolve an executable on PATH, falling back to the name as given."""
    return shutil.which(name) or name


def build_select_filter(indices: list[int]) -> str:
    """Build ``select=eq(n\\,i0)+eq(n\\,i1)+...`` for the given frame indices.

    ``+`` is a logical OR over the decoder's frame counter ``n``; commas
    inside the expression are escaped for the filtergraph parser.
    """
    if not indices:
        raise ValueError("Cannot build a selection filter for zero frames")
    terms = "+".join(f"eq(n\\,{int(i)})" for i in indices)
    return f"select={terms}"


def parse_frame_count(raw: bytes) -> int:
    """Parse ffprobe's bare ``nb_read_packets`` output."""
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ProbeParseError(f"ffprobe output is not valid UTF-8: {e}") from e

    text = text.strip()
    if not text:
        raise ProbeExecutionError("ffprobe reported no video stream")
    try:
        count = int(text)
    except ValueError as e:
        raise ProbeParseError(f"ffprobe output is not an integer: {text[:80]!r}") from e
    if count < 0:
        raise ProbeParseError(f"ffprobe reported a negative frame count: {count}")
    return count


class FFmpegToolkit:
    """Probe with ffprobe, decode with ffmpeg. Every call blocks until exit."""

    def __init__(
        self,
        ffmpeg: str = "ffmpeg",
        ffprobe: str = "ffprobe",
        timeout: float | None = None,
        vfr_option: str = "-vsync",
    ):
        self.ffmpeg = resolve_binary(ffmpeg)
        self.ffprobe = resolve_binary(ffprobe)
        self.timeout = timeout
        self.vfr_option = vfr_option

    def probe_command(self, video_path: Path) -> list[str]:
        return [
            self.ffprobe,
            "-v", "error",
            "-select_streams", "v:0",
            "-count_packets",
            "-show_entries", "stream=nb_read_packets",
            "-of", "csv=p=0",
            str(video_path),
        ]

    def decode_command(
        self,
        video_path: Path,
        indices: list[int],
        output_pattern: str,
        quiet: bool = False,
    ) -> list[str]:
        cmd = [self.ffmpeg, "-y", "-nostdin"]
        if quiet:
            cmd += ["-hide_banner", "-loglevel", "error"]
        cmd += [
            "-i", str(video_path),
            "-vf", build_select_filter(indices),
            self.vfr_option, "vfr",
            output_pattern,
        ]
        return cmd

    def count_frames(self, video_path: Path) -> int:
        cmd = self.probe_command(video_path)
        try:
            result = run_command(cmd, timeout=self.timeout, text=False)
        except OSError as e:
            raise ProbeExecutionError(f"Cannot run ffprobe ({self.ffprobe}): {e}") from e
        except subprocess.TimeoutExpired as e:
            raise ProbeExecutionError(f"ffprobe timed out after {self.timeout}s") from e
        except subprocess.CalledProcessError as e:
            raise ProbeExecutionError(
                f"ffprobe failed (rc={e.returncode}): {tail_output(e.stderr)}"
            ) from e

        count = parse_frame_count(result.stdout)
        logger.info(f"Probed {count} frames in {video_path.name}")
        return count

    def decode(
        self,
        video_path: Path,
        indices: list[int],
        output_pattern: str,
        quiet: bool = False,
    ) -> None:
        cmd = self.decode_command(video_path, indices, output_pattern, quiet)
        try:
            run_command(cmd, timeout=self.timeout, capture=quiet)
        except OSError as e:
            raise DecodeExecutionError(f"Cannot run ffmpeg ({self.ffmpeg}): {e}") from e
        except subprocess.TimeoutExpired as e:
            raise DecodeExecutionError(f"ffmpeg timed out after {self.timeout}s") from e
        except subprocess.CalledProcessError as e:
            logger.error(f"ffmpeg error: {tail_output(e.stderr)}")
            raise DecodeExecutionError(f"ffmpeg failed (rc={e.returncode})") from e
