"""Console implementation of the yes/no and text prompts."""

from __future__ import annotations

import sys
from typing import Callable

from templaar.ports.interaction import Prompter


class ConsolePrompter(Prompter):
    def __init__(self, reader: Callable[[], str] | None = None) -> None:
        self._reader = reader or sys.stdin.readline

    def _read(self, prompt: str) -> str:
        print(prompt, end="", flush=True)
        try:
            line = self._reader()
        except EOFError:
            line = ""
        return line.strip()

    def confirm(self, prompt: str) -> bool:
        answer = self._read(f"{prompt} [Y/n]: ")
        return answer.lower() != "n"

    def ask(self, prompt: str, default: str) -> str:
        answer = self._read(f"{prompt}: ")
        return answer or default
