"""
models.py

pydantic record for a stored configuration and a small dataclass for command results.
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field


class Configuration(BaseModel):
    model_config = ConfigDict(strict=True)

    active: bool = Field(..., description="whether clone/start/stop act on this configuration")
    url: str = Field(..., description="source repository location, passed to git as-is")
    clone_path: str | None = Field(None, description="local checkout, set once cloned")

    def clone_project(self, clone_path: str) -> None:
        self.clone_path = clone_path

    def to_table(self) -> dict[str, object]:
        # toml has no null, so an unset clone_path is left out
        return self.model_dump(exclude_none=True)


@dataclass
class CmdResult:
    cmd: list[str]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0
