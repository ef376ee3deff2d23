"""Local JSONL log of templaar command outcomes.

Every ``take`` / ``new`` / ``list`` invocation appends one record to
``<log_dir>/telemetry.jsonl``. Records are checked against the packaged
``telemetry.schema.json`` before they are written. Set
``TEMPLAAR_TELEMETRY=0`` to disable recording.
"""

from __future__ import annotations

import json
import os
import time
from collections import Counter, defaultdict, deque
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any, Iterable, Iterator

import jsonschema

from templaar.settings import RuntimeSettings

LOG_FILENAME = "telemetry.jsonl"
SCHEMA_RESOURCE = "telemetry.schema.json"

_DISABLE_VALUES = {"0", "false", "no", "off"}


def telemetry_enabled() -> bool:
    return os.getenv("TEMPLAAR_TELEMETRY", "1").strip().lower() not in _DISABLE_VALUES


def log_path(settings: RuntimeSettings) -> Path:
    return settings.log_dir / LOG_FILENAME


def record_event(
    settings: RuntimeSettings,
    event: str,
    payload: dict[str, Any] | None = None,
    *,
    level: str = "info",
    status: str | None = None,
    component: str | None = None,
    duration_ms: float | None = None,
) -> None:
    """Append one command record; raises ``jsonschema.ValidationError`` if malformed."""

    if not telemetry_enabled():
        return
    record: dict[str, Any] = {"ts": time.time(), "event": event, "payload": dict(payload or {}), "level": level}
    optional = {"status": status, "component": component, "durationMs": duration_ms}
    record.update({key: value for key, value in optional.items() if value is not None})
    _schema_validator().validate(record)

    path = log_path(settings)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("a", encoding="utf-8") as fh:
        fh.write(json.dumps(record, ensure_ascii=False) + "\n")


def iter_events(settings: RuntimeSettings) -> Iterator[dict[str, Any]]:
    """Yield stored records, skipping blank, corrupt or non-object lines."""

    path = log_path(settings)
    if not path.exists():
        return
    with path.open("r", encoding="utf-8") as fh:
        for raw in fh:
            try:
                record = json.loads(raw)
            except json.JSONDecodeError:
                continue
            if isinstance(record, dict):
                yield record


def tail(settings: RuntimeSettings, limit: int) -> list[dict[str, Any]]:
    return list(deque(iter_events(settings), maxlen=limit))


def summarize(events: Iterable[dict[str, Any]]) -> dict[str, Any]:
    """Aggregate records per command and status.

    ``take`` records are additionally broken down by template scope (local
    versus global) and outcome, and counted per template name.
    """

    by_event: Counter[str] = Counter()
    by_status: Counter[str] = Counter()
    take_by_scope: defaultdict[str, Counter[str]] = defaultdict(Counter)
    take_by_template: Counter[str] = Counter()
    for evt in events:
        status = evt.get("status", "unknown")
        by_event[evt.get("event", "unknown")] += 1
        by_status[status] += 1
        if evt.get("event") != "take":
            continue
        payload = evt.get("payload") or {}
        take_by_scope[payload.get("scope", "unknown")][status] += 1
        if "template" in payload:
            take_by_template[payload["template"]] += 1
    return {
        "total": sum(by_event.values()),
        "by_event": dict(by_event),
        "by_status": dict(by_status),
        "take": {
            "by_scope": {scope: dict(counts) for scope, counts in take_by_scope.items()},
            "by_template": dict(take_by_template),
        },
    }


def clear(settings: RuntimeSettings) -> None:
    log_path(settings).unlink(missing_ok=True)


@lru_cache(maxsize=1)
def _schema_validator() -> jsonschema.Draft202012Validator:
    schema_text = (resources.files("templaar.resources") / SCHEMA_RESOURCE).read_text(encoding="utf-8")
    return jsonschema.Draft202012Validator(json.loads(schema_text))
