"""
vcs.py

git invocations. only clone is needed.
"""

from __future__ import annotations

from pathlib import Path

from .models import CmdResult
from .settings import GIT_BIN
from .utils_run import Runner, run_cmd


def git_clone(url: str, name: str, dest: Path, run: Runner = run_cmd) -> CmdResult:
    return run([GIT_BIN, "clone", url, name], cwd=dest)
