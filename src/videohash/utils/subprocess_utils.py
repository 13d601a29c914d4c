"""Safe subprocess runner for external tools (ffmpeg, ffprobe)."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)


def tail_output(data: str | bytes | None, size: int = 500) -> str:
    if not data:
        return ""
    if isinstance(data, bytes):
        data = data.decode("utf-8", errors="replace")
    return data[-size:]


def run_command(
    cmd: list[str],
    cwd: Path | None = None,
    timeout: float | None = None,
    check: bool = True,
    capture: bool = True,
    text: bool = True,
) -> subprocess.CompletedProcess:
    """Run an external command with logging and error handling.

    With ``capture=False`` the tool writes straight to the inherited
    stdout/stderr; otherwise its output is kept on the result and only
    logged at debug level.
    """
    cmd_str = " ".join(cmd)
    logger.info(f"Running: {cmd_str}")

    result = subprocess.run(
        cmd,
        cwd=cwd,
        capture_output=capture,
        text=text,
        timeout=timeout,
        check=False,
    )

    if result.stdout:
        logger.debug(f"stdout: {tail_output(result.stdout)}")
    if result.stderr:
        logger.debug(f"stderr: {tail_output(result.stderr)}")

    if check and result.returncode != 0:
        raise subprocess.CalledProcessError(
            result.returncode, cmd_str, result.stdout, result.stderr
        )
    return result
