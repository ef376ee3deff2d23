"""Filesystem-backed template store."""

from __future__ import annotations

from pathlib import Path

from templaar.domain.template import is_template_path
from templaar.ports.template_store import TemplateStore


class FSTemplateStore(TemplateStore):
    def __init__(self, global_dir: Path) -> None:
        self._global_dir = global_dir

    def list_templates(self, directory: Path) -> set[Path]:
        found: set[Path] = set()
        for entry in directory.iterdir():
            try:
                entry.lstat()
            except OSError:
                continue
            if is_template_path(entry):
                found.add(entry)
        return found

    def global_dir(self) -> Path:
        self._global_dir.mkdir(parents=True, exist_ok=True)
        return self._global_dir
