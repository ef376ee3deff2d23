"""Locate the template to instantiate.

The search walks from the working directory up through its ancestors and
stops at the first directory holding a match. Only when no ancestor matches
and a template name was supplied is the global templates directory consulted.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from templaar.domain.errors import AmbiguousTemplateError, TemplateNotFoundError
from templaar.domain.template import Scope, TemplateLocation, decode_name
from templaar.ports.template_store import TemplateStore


@dataclass
class TemplateResolver:
    store: TemplateStore
    cwd: Callable[[], Path] = field(default=Path.cwd)

    def resolve(self, name: str | None = None) -> TemplateLocation:
        directory = self.cwd()
        while True:
            match = self.find_in_dir(directory, name)
            if match is not None:
                return TemplateLocation(path=match, scope=Scope.LOCAL)
            parent = directory.parent
            if parent == directory:
                break
            directory = parent

        # Global lookup requires an explicit name.
        if name is None:
            raise TemplateNotFoundError()
        match = self.find_in_dir(self.store.global_dir(), name)
        if match is None:
            raise TemplateNotFoundError(name)
        return TemplateLocation(path=match, scope=Scope.GLOBAL)

    def find_in_dir(self, directory: Path, name: str | None) -> Path | None:
        """Return the single template in ``directory`` matching ``name``.

        Without a name any ``.aar`` entry qualifies. Several candidates raise
        :class:`AmbiguousTemplateError`.
        """

        candidates = self.store.list_templates(directory)
        if name is not None:
            candidates = {path for path in candidates if decode_name(path) == name}
        if not candidates:
            return None
        if len(candidates) > 1:
            names = sorted(decode_name(path) for path in candidates)
            raise AmbiguousTemplateError(names, directory)
        (match,) = candidates
        return directory / match.name
