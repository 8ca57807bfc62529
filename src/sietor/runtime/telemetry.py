"""Editor logging on top of telelog.

Buffer edits, key dispatch and keymap changes run inside ``span`` blocks;
each block ends with one ``span::end`` (or ``span::fail``) line carrying
the metadata collected while it ran, e.g. the cursor before and after an
edit. Everything is configured from ``SIETOR_*`` environment variables.
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, MutableMapping, Optional, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "SIETOR_"
LOGGER_NAME = "sietor"
LEVELS = ("debug", "info", "warning", "error")

_LOGGER_CACHE: MutableMapping[str, Any] = {}
_ACTIVE_CONFIG: Optional[Any] = None


def _env(name: str) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}")


def _env_flag(name: str) -> bool:
    return (_env(name) or "").lower() in {"1", "true", "yes", "on"}


def _format_value(value: Any) -> str:
    # Cursor positions and other pairs read as "row,col".
    if isinstance(value, tuple):
        return ",".join(str(item) for item in value)
    return str(value)


def _format_fields(fields: Dict[str, Any]) -> str:
    return " ".join(f"{key}={_format_value(value)}" for key, value in fields.items())


def _preset_config(preset: str) -> Any:
    config = tl.Config()
    if preset == "development":
        config.with_min_level("DEBUG")
        config.with_console_output(True)
        config.with_colored_output(True)
    elif preset == "production":
        # The editor owns the terminal, so production logs go to a file only.
        config.with_min_level("INFO")
        config.with_console_output(False)
        config.with_file_output(_env("LOG_FILE") or "sietor.log")
        config.with_buffering(True)
    else:
        raise ValueError(f"Unknown preset '{preset}'.")
    return config


def _env_config() -> Any:
    config = tl.Config()
    config.with_min_level((_env("LOG_LEVEL") or "WARNING").upper())
    console = not _env_flag("DISABLE_CONSOLE")
    config.with_console_output(console)
    if console:
        config.with_colored_output(not _env_flag("NO_COLOR"))
    if _env_flag("LOG_JSON"):
        config.with_json_format(True)
    log_file = _env("LOG_FILE")
    if log_file:
        config.with_file_output(log_file)
    return config


def configure(*, preset: Optional[str] = None) -> None:
    """Rebuild the telelog configuration and drop cached loggers.

    ``preset`` is ``"development"`` or ``"production"``; without one the
    ``SIETOR_*`` environment variables decide.
    """

    global _ACTIVE_CONFIG
    _ACTIVE_CONFIG = _preset_config(preset.lower()) if preset else _env_config()
    _LOGGER_CACHE.clear()


def get_logger(name: Optional[str] = None) -> Any:
    logger_name = name or LOGGER_NAME
    if logger_name not in _LOGGER_CACHE:
        if _ACTIVE_CONFIG is None:
            configure()
        _LOGGER_CACHE[logger_name] = tl.Logger.with_config(logger_name, _ACTIVE_CONFIG)
    return _LOGGER_CACHE[logger_name]


def _log_at(logger: Any, level: str, message: str) -> None:
    if level not in LEVELS:
        raise ValueError(f"Unsupported log level '{level}'.")
    getattr(logger, level)(message)


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Log ``event::<name>`` followed by ``data`` as ``key=value`` pairs."""

    message = f"event::{name}"
    if data:
        message = f"{message} {_format_fields(data)}"
    _log_at(get_logger(logger_name), level, message)


@dataclass
class SpanHandle:
    """Collects metadata while a ``span`` block runs."""

    logger: Any
    name: str
    metadata: Dict[str, Any] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = value

    def finish(self) -> None:
        _log_at(self.logger, "debug", self._line("span::end"))

    def fail(self, reason: str) -> None:
        self.metadata["reason"] = reason
        _log_at(self.logger, "error", self._line("span::fail"))

    def _line(self, prefix: str) -> str:
        fields = {"span": self.name, **self.metadata}
        return f"{prefix} {_format_fields(fields)}"


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile a block with telelog, optionally tracked as a component.

    ``component=True`` reuses ``name`` as the component. Exceptions are
    logged through ``SpanHandle.fail`` and re-raised.
    """

    log = get_logger(logger_name)
    component_name = name if component is True else component or None
    handle = SpanHandle(logger=log, name=name, metadata=dict(metadata or {}))

    with ExitStack() as stack:
        if component_name:
            stack.enter_context(log.track_component(component_name))
        stack.enter_context(log.profile(name))
        try:
            yield handle
        except Exception as exc:
            handle.fail(str(exc))
            raise
        handle.finish()


__all__ = ["SpanHandle", "configure", "get_logger", "record_event", "span"]
