"""
prompts.py

where interactive answers come from. commands only see a PromptSource,
so they can be driven without a terminal.
"""

from __future__ import annotations

from typing import Protocol

import typer


class PromptSource(Protocol):
    def ask(self, message: str) -> str: ...


class ConsolePrompt:
    def ask(self, message: str) -> str:
        return typer.prompt(message, prompt_suffix=":\n")
