"""Executable Textual app that hosts an editor session."""

from __future__ import annotations

import argparse
import os
from typing import Dict, Optional, Sequence

try:  # pragma: no cover - imported only when the app is run
    from rich.text import Text
    from textual import events
    from textual.app import App, ComposeResult
    from textual.widgets import Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use sietor.adapters.textual.app"
    ) from exc

from sietor.buffer import BufferView, TextBuffer
from sietor.fonts.metrics import FontMetrics, MonospaceMetrics
from sietor.layout import layout_lines
from sietor.runtime import telemetry
from sietor.session import EditorSession, Viewport
from sietor.settings import EditorSettings

from .controller import TextualEditorAdapter, TextualUIHooks

# One glyph per terminal cell, one text row per line.
CELL_METRICS = MonospaceMetrics(advance=1.0, ascent=1.0, descent=0.0, line_gap=0.0)


def render_view(
    view: BufferView,
    *,
    rows: int,
    cols: int,
    wireframe: bool = False,
) -> Text:
    """Render the visible window of ``view`` with the cursor cell highlighted."""

    top, left = view.view_origin
    cursor_row, cursor_col = view.cursor
    grid: Dict[int, Dict[int, str]] = {}
    for glyph in layout_lines(
        view.lines, CELL_METRICS, 1.0, first_row=top, max_rows=rows
    ):
        grid.setdefault(glyph.row, {})[int(glyph.x)] = glyph.char

    output = Text(no_wrap=True, overflow="crop")
    for row in range(top, min(len(view.lines), top + rows)):
        cells = grid.get(row, {})
        line_length = len(view.lines[row])
        for col in range(left, left + cols):
            is_cursor = (row, col) == (cursor_row, cursor_col)
            if col > line_length or (
                col == line_length and not is_cursor and not wireframe
            ):
                break
            char = cells.get(col, " ")
            style = ""
            if wireframe:
                if col < line_length and char == " ":
                    char, style = "·", "dim"
                elif col == line_length:
                    char, style = "¶", "dim"
            if is_cursor:
                style = f"{style} reverse".strip()
            output.append(char, style=style or None)
        output.append("\n")
    if not view.lines:
        output.append(" ", style="reverse")
    return output


class SietorApp(App[None]):
    """Minimal Textual UI around one ``EditorSession``."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#buffer-view {
		height: 1fr;
		padding: 0 1;
		content-align: left top;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    def __init__(self, session: EditorSession) -> None:
        super().__init__()
        self.session = session
        self.adapter: TextualEditorAdapter | None = None
        self._buffer_widget: Static | None = None
        self._status_widget: Static | None = None
        self.logger = telemetry.get_logger("sietor.app")

    def compose(self) -> ComposeResult:
        self._buffer_widget = Static("", id="buffer-view")
        self._status_widget = Static("", id="status-line")
        yield self._buffer_widget
        yield self._status_widget

    def on_mount(self) -> None:
        hooks = TextualUIHooks(
            update_buffer=self._update_buffer,
            update_status=self._update_status,
            log=self._log_line,
        )
        self.adapter = TextualEditorAdapter(self.session, hooks)

    def on_resize(self, event: events.Resize) -> None:
        del event
        if self.adapter:
            self.adapter.refresh()

    def on_key(self, event: events.Key) -> None:
        if not self.adapter:
            return
        self.adapter.handle_textual_key(event.key, text=event.character)
        event.stop()
        if not self.session.running:
            self.exit()

    def _visible_cells(self) -> tuple[int, int]:
        if self._buffer_widget is None:
            return 1, 1
        size = self._buffer_widget.content_size
        return max(size.height, 1), max(size.width, 1)

    def _update_buffer(self, view: BufferView) -> None:
        rows, cols = self._visible_cells()
        if self.session.buffer.line_count:
            self.session.buffer.scroll_cursor_into_view(rows, cols)
            view = self.session.buffer.snapshot()
        if self._buffer_widget:
            self._buffer_widget.update(
                render_view(view, rows=rows, cols=cols, wireframe=self.session.wireframe)
            )

    def _update_status(self, status: str) -> None:
        if self._status_widget:
            self._status_widget.update(status)

    def _log_line(self, line: str) -> None:
        self.logger.debug(line)


def build_session(
    path: Optional[str],
    settings: EditorSettings,
    *,
    row: Optional[int] = None,
    col: Optional[int] = None,
    font: Optional[FontMetrics] = None,
) -> EditorSession:
    cursor = (row or 0, col or 0) if row is not None or col is not None else None
    options = dict(
        cursor=cursor,
        scale_factor=settings.scale_factor,
        font_size=settings.font_size,
    )
    if path is None:
        buffer = TextBuffer.empty(**options)
    else:
        with open(path, "rb") as handle:
            buffer = TextBuffer.from_file(handle, name=path, **options)
    return EditorSession(
        buffer,
        viewport=Viewport(settings.viewport_width, settings.viewport_height),
        font=font if font is not None else settings.load_font(),
    )


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Edit a text file in the terminal.")
    parser.add_argument("path", nargs="?", help="File to open (empty buffer if omitted)")
    parser.add_argument("--row", type=int, default=None, help="Initial cursor row (0-based)")
    parser.add_argument("--col", type=int, default=None, help="Initial cursor column (0-based)")
    parser.add_argument(
        "--font-size", type=float, default=None, help="Font size in points"
    )
    parser.add_argument("--font-path", default=None, help="TrueType font for cursor metrics")
    parser.add_argument(
        "--scale-factor", type=float, default=None, help="Display scale multiplier"
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    # The app owns the terminal; console log output would corrupt the screen.
    os.environ.setdefault("SIETOR_DISABLE_CONSOLE", "1")
    telemetry.configure()
    settings = EditorSettings.from_env()
    if args.font_size is not None:
        settings.font_size = args.font_size
    if args.scale_factor is not None:
        settings.scale_factor = args.scale_factor
    if args.font_path is not None:
        settings.font_path = args.font_path
    font = settings.load_font()
    try:
        font.font(settings.font_size * settings.scale_factor)
    except OSError as exc:
        raise SystemExit(f"Cannot load font {settings.font_path!r}: {exc}") from exc
    session = build_session(args.path, settings, row=args.row, col=args.col, font=font)
    SietorApp(session).run()


if __name__ == "__main__":  # pragma: no cover - manual run
    main()
