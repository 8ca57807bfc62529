from __future__ import annotations

import io

from sietor.buffer import (
    ClearKind,
    EmptyOrigin,
    Lang,
    SourceKind,
    TextBuffer,
    TextOrigin,
    detect_kind,
    split_lines,
)


def test_empty_buffer_defaults() -> None:
    buffer = TextBuffer(EmptyOrigin())

    assert buffer.lines == ()
    assert buffer.line_count == 0
    assert buffer.cursor.text_position == (0, 0)
    assert buffer.view_origin == (0, 0)
    assert buffer.backing_file is None
    assert buffer.kind == ClearKind()


def test_empty_buffer_keeps_view_origin_but_not_cursor() -> None:
    buffer = TextBuffer.empty(cursor=(1, 2), view_origin=(3, 4))

    assert buffer.cursor.text_position == (0, 0)
    assert buffer.view_origin == (3, 4)


def test_text_origin_splits_lines() -> None:
    buffer = TextBuffer(TextOrigin("test"))

    assert buffer.lines == ("test",)
    assert buffer.backing_file is None


def test_text_origin_strips_terminators() -> None:
    buffer = TextBuffer.from_text("a\r\nb\n")

    assert buffer.lines == ("a", "b")
    assert buffer.text == "a\nb"


def test_initial_cursor_is_clamped_to_content() -> None:
    buffer = TextBuffer.from_text("ab\ncd", cursor=(5, 9))

    assert buffer.cursor.text_position == (1, 2)


def test_initial_cursor_inside_content_is_kept() -> None:
    buffer = TextBuffer.from_text("abc\ndef", cursor=(1, 1), view_origin=(1, 0))

    assert buffer.cursor.text_position == (1, 1)
    assert buffer.view_origin == (1, 0)


def test_binary_file_handle_is_decoded() -> None:
    handle = io.BytesIO("[package]\nname = \"héllo\"\n".encode("utf-8"))

    buffer = TextBuffer.from_file(handle)

    assert buffer.lines[0] == "[package]"
    assert buffer.lines[1] == 'name = "héllo"'
    assert buffer.backing_file is handle


def test_text_file_handle_is_read() -> None:
    buffer = TextBuffer.from_file(io.StringIO("one\ntwo"))

    assert buffer.lines == ("one", "two")


def test_file_name_sets_kind(tmp_path) -> None:
    path = tmp_path / "main.rs"
    path.write_text("fn main() {}\n", encoding="utf-8")

    with open(path, "rb") as handle:
        buffer = TextBuffer.from_file(handle)

    assert buffer.kind == SourceKind(Lang.RUST)
    assert buffer.lines == ("fn main() {}",)


def test_split_lines_rules() -> None:
    assert split_lines("") == []
    assert split_lines("a\n") == ["a"]
    assert split_lines("a\n\nb") == ["a", "", "b"]
    assert split_lines("a\rb\r\nc") == ["a", "b", "c"]
    assert split_lines("\n") == [""]


def test_detect_kind() -> None:
    assert detect_kind("lib.PY") == SourceKind(Lang.PYTHON)
    assert detect_kind("notes.txt") == ClearKind()
    assert detect_kind(None) == ClearKind()


def test_snapshot_reflects_state() -> None:
    buffer = TextBuffer.from_text("ab\ncd", cursor=(1, 1))

    view = buffer.snapshot()

    assert view.lines == ("ab", "cd")
    assert view.cursor == (1, 1)
    assert view.version == 0
