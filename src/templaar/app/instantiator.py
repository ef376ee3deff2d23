"""Materialise a target file or directory from a resolved template."""

from __future__ import annotations

import shutil
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable

from templaar.app.resolver import TemplateResolver
from templaar.domain.errors import InvalidTemplateError, PathExistsError
from templaar.domain.template import TemplateLocation
from templaar.ports.interaction import Editor, Prompter

NON_EMPTY_DIR_PROMPT = "Directory {path} is not empty, do you wish to continue?"
NO_CHANGE_PROMPT = "The file contains no change from the template. Save it anyways?"


class TakeStatus(str, Enum):
    CREATED = "created"
    ABORTED = "aborted"
    DISCARDED = "discarded"


@dataclass(frozen=True)
class TakeOutcome:
    status: TakeStatus
    template: TemplateLocation
    target: Path


@dataclass
class TemplateInstantiator:
    """Copy templates into place without clobbering existing data."""

    resolver: TemplateResolver
    editor: Editor
    prompter: Prompter
    cwd: Callable[[], Path] = field(default=Path.cwd)

    def take(self, name: str | None = None, template: str | None = None) -> TakeOutcome:
        location = self.resolver.resolve(template)
        target_name = name if name is not None else location.name
        return self.instantiate(location, self.cwd() / target_name)

    def instantiate(self, location: TemplateLocation, target: Path) -> TakeOutcome:
        if location.is_directory:
            return self._instantiate_directory(location, target)
        return self._instantiate_file(location, target)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _instantiate_directory(self, location: TemplateLocation, target: Path) -> TakeOutcome:
        template_files = sorted(location.path.iterdir())
        if any(child.is_dir() for child in template_files):
            raise InvalidTemplateError(location.path, "directory template contains sub-directories")

        if not target.exists():
            target.mkdir()

        target_files = sorted(target.iterdir())
        if target_files:
            if not self.prompter.confirm(NON_EMPTY_DIR_PROMPT.format(path=target)):
                return TakeOutcome(TakeStatus.ABORTED, location, target)

        template_names = {child.name for child in template_files}
        for existing in target_files:
            if existing.name in template_names:
                raise PathExistsError(existing)

        for child in template_files:
            shutil.copyfile(child, target / child.name)

        self.editor.open(target)
        return TakeOutcome(TakeStatus.CREATED, location, target)

    def _instantiate_file(self, location: TemplateLocation, target: Path) -> TakeOutcome:
        if target.exists() or target.is_symlink():
            raise PathExistsError(target)

        shutil.copyfile(location.path, target)
        self.editor.open(target)

        if target.read_bytes() == location.path.read_bytes():
            if not self.prompter.confirm(NO_CHANGE_PROMPT):
                target.unlink()
                return TakeOutcome(TakeStatus.DISCARDED, location, target)
        return TakeOutcome(TakeStatus.CREATED, location, target)


__all__ = ["TakeOutcome", "TakeStatus", "TemplateInstantiator"]
