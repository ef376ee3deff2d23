from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
PYTEST_TEMP = Path(os.environ.get("PYTEST_DEBUG_TEMPROOT", "/tmp/templaar-pytest")).resolve()
os.environ.setdefault("PYTEST_DEBUG_TEMPROOT", str(PYTEST_TEMP))
PYTEST_TEMP.mkdir(parents=True, exist_ok=True)
SANDBOX_HOME = PYTEST_TEMP / "global-home"
os.environ.setdefault("TEMPLAAR_HOME", str(SANDBOX_HOME))
os.environ.setdefault("TEMPLAAR_TELEMETRY", "0")
for entry in (SRC, ROOT):
    if str(entry) not in sys.path:
        sys.path.insert(0, str(entry))

from tests._doubles import RecordingEditor  # noqa: E402


@pytest.fixture()
def editor() -> RecordingEditor:
    return RecordingEditor()


@pytest.fixture()
def project_dir(tmp_path: Path) -> Path:
    path = tmp_path / "project"
    path.mkdir()
    return path


@pytest.fixture()
def global_dir(tmp_path: Path) -> Path:
    return tmp_path / "global"
