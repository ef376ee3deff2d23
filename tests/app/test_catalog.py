from __future__ import annotations

from pathlib import Path

from templaar.adapters.fs_template_store import FSTemplateStore
from templaar.app.catalog import TemplateCatalog, format_entries
from templaar.domain.template import Scope


def seed(project_dir: Path, global_dir: Path) -> TemplateCatalog:
    global_dir.mkdir()
    (project_dir / ".note.aar").write_text("", encoding="utf-8")
    (project_dir / ".changelog.aar").mkdir()
    (project_dir / "README.md").write_text("", encoding="utf-8")
    (global_dir / "todo.aar").write_text("", encoding="utf-8")
    return TemplateCatalog(FSTemplateStore(global_dir), cwd=lambda: project_dir)


def test_entries_list_local_then_global(project_dir: Path, global_dir: Path) -> None:
    entries = seed(project_dir, global_dir).entries()

    assert [(entry.name, entry.scope) for entry in entries] == [
        ("changelog", Scope.LOCAL),
        ("note", Scope.LOCAL),
        ("todo", Scope.GLOBAL),
    ]


def test_entries_can_be_restricted(project_dir: Path, global_dir: Path) -> None:
    catalog = seed(project_dir, global_dir)

    assert [entry.name for entry in catalog.entries(include_global=False)] == ["changelog", "note"]
    assert [entry.name for entry in catalog.entries(include_local=False)] == ["todo"]


def test_local_listing_does_not_walk_parents(project_dir: Path, global_dir: Path) -> None:
    catalog = seed(project_dir, global_dir)
    nested = project_dir / "nested"
    nested.mkdir()
    catalog.cwd = lambda: nested

    assert catalog.entries(include_global=False) == []


def test_format_entries_aligns_scope_column(project_dir: Path, global_dir: Path) -> None:
    lines = format_entries(seed(project_dir, global_dir).entries())

    assert lines == [
        "changelog  [local]",
        "note       [local]",
        "todo       [global]",
    ]


def test_format_entries_empty() -> None:
    assert format_entries([]) == []
