"""Editor adapter that runs an external command in a subprocess."""

from __future__ import annotations

import os
import shlex
import subprocess
from pathlib import Path
from typing import Any, Mapping

from templaar.domain.errors import EditorLaunchError, EditorNotConfiguredError
from templaar.ports.interaction import Editor


def resolve_editor_command(config: Mapping[str, Any], environ: Mapping[str, str] | None = None) -> str:
    """Pick the editor command: ``$EDITOR`` first, then ``editor`` from config.yaml."""

    env = os.environ if environ is None else environ
    command = env.get("EDITOR", "").strip()
    if command:
        return command
    configured = config.get("editor")
    if isinstance(configured, str) and configured.strip():
        return configured.strip()
    raise EditorNotConfiguredError()


class SubprocessEditor(Editor):
    def __init__(self, command: str) -> None:
        self._command = command
        try:
            self._argv = shlex.split(command)
        except ValueError as exc:
            raise EditorLaunchError(command, f"malformed command ({exc})") from exc
        if not self._argv:
            raise EditorLaunchError(command, "empty command")

    @property
    def command(self) -> str:
        return self._command

    def open(self, path: Path) -> int:
        try:
            completed = subprocess.run([*self._argv, str(path)], check=False)
        except OSError as exc:
            raise EditorLaunchError(self._command, exc.strerror or str(exc)) from exc
        return completed.returncode
