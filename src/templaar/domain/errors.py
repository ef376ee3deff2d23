"""Error taxonomy surfaced by template resolution and instantiation."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence


class TemplaarError(RuntimeError):
    """Base class for failures reported to the user."""


class TemplateNotFoundError(TemplaarError):
    """No template was located in the search chain."""

    def __init__(self, name: str | None = None) -> None:
        self.name = name
        if name is None:
            message = (
                "No template found in the current or parent directories.\n"
                "For global templates, specify the template name using the -t option."
            )
        else:
            message = f"Template '{name}' not found in the current, parent or global directories."
        super().__init__(message)


class AmbiguousTemplateError(TemplaarError):
    """Several candidate templates were found in one directory."""

    def __init__(self, names: Sequence[str], directory: Path) -> None:
        self.names = list(names)
        self.directory = directory
        listed = ", ".join(self.names)
        super().__init__(
            f"Ambiguous template: found [{listed}] in {directory}. Use -t to select the template."
        )


class PathExistsError(TemplaarError):
    """The target (or one of its children) already exists."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Cannot create {path} from template, path already exists.")


class InvalidTemplateError(TemplaarError):
    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid template {path}: {reason}")


class TemplateExistsError(TemplaarError):
    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Template {path} already exists. Please edit it manually.")


class EditorNotConfiguredError(TemplaarError):
    def __init__(self) -> None:
        super().__init__("No editor configured. Set $EDITOR or 'editor' in config.yaml.")


class EditorLaunchError(TemplaarError):
    def __init__(self, command: str, detail: str) -> None:
        self.command = command
        super().__init__(f"Failed to launch editor '{command}': {detail}")


class ConfigurationError(TemplaarError):
    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid configuration {path}: {reason}")
