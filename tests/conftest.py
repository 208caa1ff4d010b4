from __future__ import annotations

import io
from pathlib import Path
from typing import Callable

import pytest
from rich.console import Console

from comphost.commands import Report
from comphost.config_store import ConfigStore
from comphost.models import CmdResult


class FakeRunner:
    """
    stands in for run_cmd. records every call; results come from `rules`,
    a list of (predicate, CmdResult factory) pairs checked in order. unmatched
    commands succeed with empty output.
    """

    def __init__(self):
        self.calls: list[tuple[list[str], Path | None]] = []
        self.rules: list[tuple[Callable[[list[str]], bool], Callable[[list[str]], CmdResult]]] = []

    def on(self, predicate: Callable[[list[str]], bool], returncode: int = 0, stdout: str = "", stderr: str = ""):
        self.rules.append((predicate, lambda cmd: CmdResult(cmd, returncode, stdout, stderr)))

    def __call__(self, cmd: list[str], cwd: Path | None = None, **kwargs) -> CmdResult:
        self.calls.append((list(cmd), cwd))
        for predicate, make in self.rules:
            if predicate(cmd):
                return make(cmd)
        return CmdResult(cmd, 0)

    def commands(self) -> list[str]:
        return [" ".join(cmd[1:]) for cmd, _ in self.calls]


class ScriptedPrompt:
    def __init__(self, answers: list[str]):
        self._answers = list(answers)
        self.asked: list[str] = []

    def ask(self, message: str) -> str:
        self.asked.append(message)
        return self._answers.pop(0)


@pytest.fixture()
def runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture()
def report() -> Report:
    out = Console(file=io.StringIO(), soft_wrap=True, color_system=None)
    err = Console(file=io.StringIO(), soft_wrap=True, color_system=None)
    return Report(out=out, err=err)


def output_of(report: Report) -> tuple[str, str]:
    return report.out.file.getvalue(), report.err.file.getvalue()


@pytest.fixture()
def store(tmp_path: Path) -> ConfigStore:
    return ConfigStore(tmp_path / "config" / "config.toml")


@pytest.fixture()
def home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """
    points HOME at an empty temp directory so the cli uses
    <tmp>/home/.config/comphost/config.toml.
    """
    h = tmp_path / "home"
    h.mkdir()
    monkeypatch.setenv("HOME", str(h))
    monkeypatch.delenv("COMPHOST_CONFIG", raising=False)
    monkeypatch.delenv("COMPHOST_CMD_TIMEOUT", raising=False)
    return h
