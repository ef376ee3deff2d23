"""Ports for the interactive collaborators used by the core."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path


class Editor(ABC):
    @abstractmethod
    def open(self, path: Path) -> int:
        """Open ``path`` in the editor and block until it exits."""


class Prompter(ABC):
    @abstractmethod
    def confirm(self, prompt: str) -> bool:
        """Ask a yes/no question; anything but "n" counts as yes."""

    @abstractmethod
    def ask(self, prompt: str, default: str) -> str:
        """Ask for a line of text, falling back to ``default`` on empty input."""
