"""List templates available in the working directory and globally."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List

from templaar.domain.template import Scope, decode_name
from templaar.ports.template_store import TemplateStore


@dataclass(frozen=True)
class CatalogEntry:
    name: str
    scope: Scope
    path: Path


@dataclass
class TemplateCatalog:
    store: TemplateStore
    cwd: Callable[[], Path] = field(default=Path.cwd)

    def entries(self, *, include_local: bool = True, include_global: bool = True) -> List[CatalogEntry]:
        entries: List[CatalogEntry] = []
        if include_local:
            entries.extend(self._scan(self.cwd(), Scope.LOCAL))
        if include_global:
            entries.extend(self._scan(self.store.global_dir(), Scope.GLOBAL))
        return entries

    def _scan(self, directory: Path, scope: Scope) -> List[CatalogEntry]:
        found = [CatalogEntry(decode_name(path), scope, path) for path in self.store.list_templates(directory)]
        return sorted(found, key=lambda entry: entry.name)


def format_entries(entries: List[CatalogEntry]) -> List[str]:
    align = max((len(entry.name) for entry in entries), default=0) + 1
    return [f"{entry.name:<{align}} [{entry.scope.value}]" for entry in entries]
