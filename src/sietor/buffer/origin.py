"""Where buffer content comes from, and what kind of content it is."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from enum import Enum
from typing import IO, Any, List, Optional, Union

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


@dataclass(frozen=True, slots=True)
class FileOrigin:
    """Content is read once from a readable handle (text or binary)."""

    handle: IO[Any]


@dataclass(frozen=True, slots=True)
class TextOrigin:
    """Content generated in memory; no file is tied to the buffer."""

    text: str


@dataclass(frozen=True, slots=True)
class EmptyOrigin:
    """No content at all."""


BufferOrigin = Union[FileOrigin, TextOrigin, EmptyOrigin]


class Lang(str, Enum):
    RUST = "rust"
    PYTHON = "python"
    C = "c"
    MARKDOWN = "markdown"


_EXTENSIONS = {
    ".rs": Lang.RUST,
    ".py": Lang.PYTHON,
    ".c": Lang.C,
    ".h": Lang.C,
    ".md": Lang.MARKDOWN,
}


@dataclass(frozen=True, slots=True)
class SourceKind:
    """Buffer holds source code in a recognised language."""

    lang: Lang


@dataclass(frozen=True, slots=True)
class ClearKind:
    """Plain text."""


BufferKind = Union[SourceKind, ClearKind]


def split_lines(text: str) -> List[str]:
    """Split ``text`` on ``\\n``, ``\\r\\n`` or ``\\r`` and drop the terminators.

    A trailing terminator does not start an extra line, so ``"a\\n"`` is
    ``["a"]`` and ``""`` is ``[]``.
    """

    if not text:
        return []
    lines = _LINE_BREAK.split(text)
    if lines[-1] == "":
        lines.pop()
    return lines


def detect_kind(name: Optional[str]) -> BufferKind:
    if not name:
        return ClearKind()
    _, ext = os.path.splitext(str(name))
    lang = _EXTENSIONS.get(ext.lower())
    return SourceKind(lang) if lang is not None else ClearKind()


def read_origin(origin: BufferOrigin) -> List[str]:
    """Return the lines described by ``origin``."""

    if isinstance(origin, FileOrigin):
        data = origin.handle.read()
        if isinstance(data, (bytes, bytearray)):
            data = bytes(data).decode("utf-8", errors="replace")
        return split_lines(data)
    if isinstance(origin, TextOrigin):
        return split_lines(origin.text)
    if isinstance(origin, EmptyOrigin):
        return []
    raise TypeError(f"Unknown buffer origin {type(origin).__name__}")


def origin_kind(origin: BufferOrigin) -> BufferKind:
    if isinstance(origin, FileOrigin):
        return detect_kind(getattr(origin.handle, "name", None))
    return ClearKind()


__all__ = [
    "FileOrigin",
    "TextOrigin",
    "EmptyOrigin",
    "BufferOrigin",
    "Lang",
    "SourceKind",
    "ClearKind",
    "BufferKind",
    "split_lines",
    "detect_kind",
    "read_origin",
    "origin_kind",
]
