"""Port definitions for template storage."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path


class TemplateStore(ABC):
    @abstractmethod
    def list_templates(self, directory: Path) -> set[Path]:
        """Return every ``.aar`` entry (file or directory) in ``directory``."""

    @abstractmethod
    def global_dir(self) -> Path:
        """Return the global templates directory, creating it if missing."""
