from __future__ import annotations

from pathlib import Path

import pytest

from templaar.adapters.fs_template_store import FSTemplateStore


def test_list_templates_keeps_only_aar_entries(tmp_path: Path) -> None:
    (tmp_path / ".templ.aar").write_text("Template", encoding="utf-8")
    (tmp_path / ".pack.aar").mkdir()
    (tmp_path / "notes.txt").write_text("", encoding="utf-8")
    (tmp_path / ".upper.AAR").write_text("", encoding="utf-8")
    store = FSTemplateStore(tmp_path / "global")

    found = store.list_templates(tmp_path)

    assert found == {tmp_path / ".templ.aar", tmp_path / ".pack.aar"}


def test_list_templates_missing_directory_raises(tmp_path: Path) -> None:
    store = FSTemplateStore(tmp_path / "global")
    with pytest.raises(FileNotFoundError):
        store.list_templates(tmp_path / "missing")


def test_list_templates_includes_dangling_symlink_entries(tmp_path: Path) -> None:
    (tmp_path / ".broken.aar").symlink_to(tmp_path / "nowhere")
    store = FSTemplateStore(tmp_path / "global")
    assert store.list_templates(tmp_path) == {tmp_path / ".broken.aar"}


def test_global_dir_is_created_lazily_and_idempotently(tmp_path: Path) -> None:
    target = tmp_path / "home" / ".config" / "templaar"
    store = FSTemplateStore(target)
    assert not target.exists()

    assert store.global_dir() == target
    assert target.is_dir()
    assert store.global_dir() == target


def test_list_templates_skips_entries_whose_metadata_cannot_be_read(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    (tmp_path / ".templ.aar").write_text("Template", encoding="utf-8")
    (tmp_path / ".note.aar").write_text("Note", encoding="utf-8")
    unreadable = tmp_path / ".note.aar"
    original_lstat = Path.lstat

    def failing_lstat(self: Path):
        if self == unreadable:
            raise PermissionError(13, "Permission denied", str(self))
        return original_lstat(self)

    monkeypatch.setattr(Path, "lstat", failing_lstat)
    store = FSTemplateStore(tmp_path / "global")

    assert store.list_templates(tmp_path) == {tmp_path / ".templ.aar"}
