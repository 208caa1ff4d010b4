"""
utils_run.py

a tiny wrapper around subprocess.run that captures stdout and stderr separately.
spawn failures come back as a failed result instead of raising;
undecodable output bytes are replaced rather than raising.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Callable
from pathlib import Path

from .models import CmdResult

logger = logging.getLogger(__name__)

Runner = Callable[..., CmdResult]


def run_cmd(cmd: list[str], cwd: Path | None = None, timeout_s: float | None = None) -> CmdResult:
    logger.debug("running %s (cwd=%s)", " ".join(cmd), cwd or ".")
    try:
        p = subprocess.run(
            cmd,
            cwd=str(cwd) if cwd else None,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            encoding="utf-8",
            errors="replace",
            timeout=timeout_s,
        )
    except subprocess.TimeoutExpired:
        return CmdResult(cmd, 124, stderr=f"timeout running: {' '.join(cmd)}")
    except OSError as e:
        return CmdResult(cmd, 127, stderr=f"failed to execute {cmd[0]}: {e}")

    logger.debug("%s exited with %d", cmd[0], p.returncode)
    return CmdResult(cmd, p.returncode, p.stdout, p.stderr)
