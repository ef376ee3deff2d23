#!/usr/bin/env python3
"""Entry point for the templaar CLI."""

from __future__ import annotations

import argparse
import json
import sys
import time
from pathlib import Path
from textwrap import dedent

from templaar import __version__
from templaar.adapters.console_prompt import ConsolePrompter
from templaar.adapters.editor import SubprocessEditor, resolve_editor_command
from templaar.adapters.fs_template_store import FSTemplateStore
from templaar.app.catalog import TemplateCatalog, format_entries
from templaar.app.creator import TemplateCreator
from templaar.app.instantiator import TakeStatus, TemplateInstantiator
from templaar.app.resolver import TemplateResolver
from templaar.domain.errors import TemplaarError
from templaar.settings import SETTINGS, load_user_config
from templaar.utils.telemetry import clear as telemetry_clear
from templaar.utils.telemetry import iter_events as telemetry_iter
from templaar.utils.telemetry import record_event
from templaar.utils.telemetry import summarize as telemetry_summarize
from templaar.utils.telemetry import tail as telemetry_tail

HELP_OVERVIEW = dedent(
    """
    A simple tool for creating text files from templates.

    Templates live next to your files as .<name>.aar (local) or in the
    global directory as <name>.aar. `take` picks the nearest template
    walking up from the current directory; global templates need -t.
    """
)


def _build_store() -> FSTemplateStore:
    return FSTemplateStore(SETTINGS.home_dir)


def _build_editor() -> SubprocessEditor:
    command = resolve_editor_command(load_user_config(SETTINGS))
    return SubprocessEditor(command)


def _non_negative_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer: {raw!r}") from exc
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be a non-negative integer: {value}")
    return value


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 3)


def _report_error(command: str, exc: Exception, started: float) -> int:
    print(f"Error: {exc}", file=sys.stderr)
    record_event(
        SETTINGS,
        command,
        {"error": type(exc).__name__},
        level="error",
        status="error",
        component="cli",
        duration_ms=_elapsed_ms(started),
    )
    return 1


def _take_cmd(args: argparse.Namespace) -> int:
    started = time.perf_counter()
    try:
        store = _build_store()
        instantiator = TemplateInstantiator(
            resolver=TemplateResolver(store),
            editor=_build_editor(),
            prompter=ConsolePrompter(),
        )
        outcome = instantiator.take(args.name, args.template)
    except (TemplaarError, OSError) as exc:
        return _report_error("take", exc, started)

    if outcome.status is TakeStatus.DISCARDED:
        print(f"Discarded {outcome.target}")
    elif outcome.status is TakeStatus.ABORTED:
        print("Aborted")
    record_event(
        SETTINGS,
        "take",
        {"template": outcome.template.name, "scope": outcome.template.scope.value},
        status=outcome.status.value,
        component="cli",
        duration_ms=_elapsed_ms(started),
    )
    return 0


def _new_cmd(args: argparse.Namespace) -> int:
    started = time.perf_counter()
    try:
        creator = TemplateCreator(
            store=_build_store(),
            editor=_build_editor(),
            prompter=ConsolePrompter(),
        )
        location = creator.create(
            args.name,
            global_scope=args.global_scope,
            files=[Path(item) for item in args.files],
        )
    except (TemplaarError, OSError) as exc:
        return _report_error("new", exc, started)

    record_event(
        SETTINGS,
        "new",
        {"template": location.name, "scope": location.scope.value, "files": len(args.files)},
        status="ok",
        component="cli",
        duration_ms=_elapsed_ms(started),
    )
    return 0


def _list_cmd(args: argparse.Namespace) -> int:
    started = time.perf_counter()
    catalog = TemplateCatalog(_build_store())
    try:
        entries = catalog.entries(
            include_local=not args.global_only,
            include_global=not args.local_only,
        )
    except OSError as exc:
        return _report_error("list", exc, started)

    for line in format_entries(entries):
        print(line)
    record_event(SETTINGS, "list", {"count": len(entries)}, status="ok", component="cli")
    return 0


def _telemetry_cmd(args: argparse.Namespace) -> int:
    if args.telemetry_command == "report":
        summary = telemetry_summarize(telemetry_iter(SETTINGS))
        print(json.dumps(summary, indent=2, ensure_ascii=False))
        return 0
    if args.telemetry_command == "clear":
        telemetry_clear(SETTINGS)
        print("Telemetry log cleared")
        return 0
    if args.telemetry_command == "tail":
        for evt in telemetry_tail(SETTINGS, args.limit):
            print(json.dumps(evt, ensure_ascii=False))
        return 0
    print("Unsupported telemetry command", file=sys.stderr)
    return 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="templaar",
        description=HELP_OVERVIEW,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"templaar {__version__}")

    sub = parser.add_subparsers(dest="command", required=True)

    new_cmd = sub.add_parser("new", help="Create a template", formatter_class=argparse.RawTextHelpFormatter)
    new_cmd.add_argument("name", nargs="?", help="Name of the template")
    new_cmd.add_argument("-g", "--global", dest="global_scope", action="store_true", help="Make the template global")
    new_cmd.add_argument(
        "-f",
        "--files",
        nargs="*",
        default=[],
        help="Create the template from file(s).\nIn case of multiple files, the template will be a directory.",
    )
    new_cmd.set_defaults(func=_new_cmd)

    take_cmd = sub.add_parser("take", help="Create a file from a template", formatter_class=argparse.RawTextHelpFormatter)
    take_cmd.add_argument("name", nargs="?", help="Name of the created file.\nPath in the case of a directory template.")
    take_cmd.add_argument("-t", "--template", help="Use specific template")
    take_cmd.set_defaults(func=_take_cmd)

    list_cmd = sub.add_parser("list", help="List available templates")
    list_cmd.add_argument("-l", "--local", dest="local_only", action="store_true", help="Only list local templates")
    list_cmd.add_argument("-g", "--global", dest="global_only", action="store_true", help="Only list global templates")
    list_cmd.set_defaults(func=_list_cmd)

    telemetry_cmd = sub.add_parser("telemetry", help="Inspect local telemetry logs")
    telemetry_sub = telemetry_cmd.add_subparsers(dest="telemetry_command", required=True)
    telemetry_report = telemetry_sub.add_parser("report", help="Print aggregated telemetry stats")
    telemetry_report.set_defaults(func=_telemetry_cmd)
    telemetry_clear_cmd = telemetry_sub.add_parser("clear", help="Remove telemetry log file")
    telemetry_clear_cmd.set_defaults(func=_telemetry_cmd)
    telemetry_tail_cmd = telemetry_sub.add_parser("tail", help="Print last N telemetry events")
    telemetry_tail_cmd.add_argument("--limit", type=_non_negative_int, default=20)
    telemetry_tail_cmd.set_defaults(func=_telemetry_cmd)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
