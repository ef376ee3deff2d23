"""Create new local or global templates."""

from __future__ import annotations

import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Sequence

from templaar.domain.errors import PathExistsError, TemplateExistsError
from templaar.domain.template import Scope, TemplateLocation, encode_name
from templaar.ports.interaction import Editor, Prompter
from templaar.ports.template_store import TemplateStore

DEFAULT_TEMPLATE_NAME = "templ"
NAME_PROMPT = f"Enter template name (default '{DEFAULT_TEMPLATE_NAME}')"


@dataclass
class TemplateCreator:
    store: TemplateStore
    editor: Editor
    prompter: Prompter
    cwd: Callable[[], Path] = field(default=Path.cwd)

    def create(
        self,
        name: str | None = None,
        *,
        global_scope: bool = False,
        files: Sequence[Path] = (),
    ) -> TemplateLocation:
        """Create a template and open it in the editor.

        A single source file is copied verbatim; several source files turn the
        template into a directory holding them under their original names.
        """

        if name is None:
            name = self.prompter.ask(NAME_PROMPT, DEFAULT_TEMPLATE_NAME)
        scope = Scope.GLOBAL if global_scope else Scope.LOCAL
        directory = self.store.global_dir() if global_scope else self.cwd()
        location = TemplateLocation(path=directory / encode_name(name, scope), scope=scope)

        if location.path.exists():
            raise TemplateExistsError(location.path)

        if len(files) == 1:
            shutil.copyfile(files[0], location.path)
        elif len(files) > 1:
            seen: set[str] = set()
            for source in files:
                filename = Path(source).name
                if filename in seen:
                    raise PathExistsError(location.path / filename)
                seen.add(filename)
            location.path.mkdir()
            for source in files:
                shutil.copyfile(source, location.path / Path(source).name)

        self.editor.open(location.path)
        return location


__all__ = ["TemplateCreator"]
