"""Domain model for templates stored as ``.aar`` files or flat directories."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

TEMPLATE_SUFFIX = ".aar"
INVALID_NAME = "<invalid>"


class Scope(str, Enum):
    LOCAL = "local"
    GLOBAL = "global"


def encode_name(name: str, scope: Scope) -> str:
    """Encode template name into the corresponding file name.

    Local templates are stored as ``.<name>.aar``, global ones as ``<name>.aar``.
    """

    prefix = "" if scope is Scope.GLOBAL else "."
    return f"{prefix}{name}{TEMPLATE_SUFFIX}"


def decode_name(path: Path | str) -> str:
    """Decode the template name from a file name (inverse of ``encode_name``)."""

    stem = Path(path).stem
    try:
        stem.encode("utf-8")
    except UnicodeEncodeError:
        return INVALID_NAME
    if stem.startswith("."):
        stem = stem[1:]
    return stem


def is_template_path(path: Path) -> bool:
    return path.suffix == TEMPLATE_SUFFIX


@dataclass(frozen=True)
class TemplateLocation:
    path: Path
    scope: Scope

    @property
    def name(self) -> str:
        return decode_name(self.path)

    @property
    def is_directory(self) -> bool:
        return self.path.is_dir()
