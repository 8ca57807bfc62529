from __future__ import annotations

from sietor.adapters.textual.app import build_session, render_view
from sietor.buffer import BufferView
from sietor.fonts import PillowFontMetrics
from sietor.settings import EditorSettings


def view(lines, cursor=(0, 0), origin=(0, 0)) -> BufferView:
    return BufferView(version=0, lines=tuple(lines), cursor=cursor, view_origin=origin)


def reversed_offsets(text) -> list[int]:
    return [span.start for span in text.spans if "reverse" in str(span.style)]


def test_render_view_plain_text() -> None:
    text = render_view(view(["ab", "c"], cursor=(0, 1)), rows=5, cols=10)

    assert text.plain == "ab\nc\n"
    assert reversed_offsets(text) == [1]


def test_render_view_cursor_past_line_end() -> None:
    text = render_view(view(["ab"], cursor=(0, 2)), rows=5, cols=10)

    assert text.plain == "ab \n"
    assert reversed_offsets(text) == [2]


def test_render_view_window() -> None:
    text = render_view(
        view(["0", "1", "2345", "3"], cursor=(2, 3), origin=(1, 2)), rows=2, cols=2
    )

    assert text.plain == "\n45\n"


def test_render_view_wireframe_shows_whitespace() -> None:
    text = render_view(view(["a b"], cursor=(0, 0)), rows=5, cols=10, wireframe=True)

    assert text.plain == "a·b¶\n"


def test_build_session_from_file(tmp_path) -> None:
    path = tmp_path / "notes.md"
    path.write_text("# title\nbody\n", encoding="utf-8")

    session = build_session(str(path), EditorSettings(), row=1, col=99)

    assert session.buffer.lines == ("# title", "body")
    assert session.buffer.cursor.text_position == (1, 4)
    assert session.buffer.name == str(path)


def test_build_session_without_path() -> None:
    session = build_session(None, EditorSettings(viewport_width=100, viewport_height=50))

    assert session.buffer.lines == ()
    assert (session.viewport.width, session.viewport.height) == (100, 50)


def test_build_session_uses_configured_font_path() -> None:
    session = build_session(None, EditorSettings(font_path="/fonts/Hack-Regular.ttf"))

    assert isinstance(session.font, PillowFontMetrics)
    assert session.font.path == "/fonts/Hack-Regular.ttf"
