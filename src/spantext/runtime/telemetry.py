"""telelog wiring for spantext.

Builders run their operations inside ``span`` blocks; image and adapter
failures go through ``record_event``. Settings come from ``SPANTEXT_*``
environment variables unless ``configure`` is handed a config or preset.
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional, Tuple, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "SPANTEXT_"
DEFAULT_LOGGER_NAME = "spantext"
PRESETS = ("quiet",)

_loggers: Dict[str, Any] = {}
_config: Optional[Any] = None


def _setting(name: str) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}")


def _enabled(name: str) -> bool:
    return (_setting(name) or "").lower() in {"1", "true", "yes", "on"}


def _pairs(data: Dict[str, Any]) -> List[Tuple[str, str]]:
    return [
        (str(key), value if isinstance(value, str) else repr(value))
        for key, value in data.items()
    ]


def _config_from_env() -> Any:
    config = tl.Config()
    config.with_min_level((_setting("LOG_LEVEL") or "INFO").upper())
    console = not _enabled("DISABLE_CONSOLE")
    config.with_console_output(console)
    if console:
        config.with_colored_output(not _enabled("NO_COLOR"))
    if _enabled("LOG_JSON"):
        config.with_json_format(True)
    log_file = _setting("LOG_FILE")
    if log_file:
        config.with_file_output(log_file)
    if _enabled("LOG_BUFFERED"):
        config.with_buffering(True)
        config.with_buffer_size(int(_setting("LOG_BUFFER_SIZE") or "2048"))
    return config


def _quiet_config() -> Any:
    # no console output; hosts and tests that own the terminal use this
    config = tl.Config()
    config.with_min_level("INFO")
    config.with_console_output(False)
    return config


def configure(*, config: Optional[Any] = None, preset: Optional[str] = None) -> None:
    """Swap the active telelog config and drop cached loggers.

    ``preset`` names one of ``PRESETS``; it cannot be combined with ``config``.
    Without either, the config is rebuilt from the environment.
    """

    global _config
    if config is not None and preset is not None:
        raise ValueError("Provide either `config` or `preset`, not both.")
    if preset is not None:
        if preset.lower() not in PRESETS:
            raise ValueError(f"Unknown preset '{preset}'.")
        config = _quiet_config()
    elif config is None:
        config = _config_from_env()
    # span() profiles every block
    config.with_profiling(True)
    _config = config
    _loggers.clear()


def get_logger(name: Optional[str] = None) -> Any:
    key = name or DEFAULT_LOGGER_NAME
    logger = _loggers.get(key)
    if logger is None:
        if _config is None:
            configure()
        logger = _loggers[key] = tl.Logger.with_config(key, _config)
    return logger


def _emit(logger: Any, level: str, message: str, data: Dict[str, Any]) -> None:
    method = getattr(logger, f"{level}_with", None)
    if method is not None:
        method(message, _pairs(data))
        return
    method = getattr(logger, level, None)
    if method is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    method(f"{message} {data}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Log ``event::<name>`` at ``level`` with ``data`` as key/value pairs."""

    _emit(
        get_logger(logger_name),
        level.lower(),
        f"event::{name}",
        {"event": name, **(data or {})},
    )


@dataclass(frozen=True)
class SpanHandle:
    name: str
    component: Optional[str]
    metadata: Dict[str, str]


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile the block under ``name``.

    ``metadata`` is pushed as logger context while the block runs. A raised
    exception is logged as ``span::fail`` and propagates unchanged.
    """

    log = get_logger(logger_name)
    context = dict(_pairs(metadata or {}))
    handle = SpanHandle(name=name, component=component, metadata=context)
    with ExitStack() as stack:
        for key, value in context.items():
            log.add_context(key, value)
            stack.callback(log.remove_context, key)
        if component:
            stack.enter_context(log.track_component(component))
        stack.enter_context(log.profile(name))
        try:
            yield handle
        except Exception as exc:
            failure = {"span": name, **context, "reason": str(exc)}
            if component:
                failure["component"] = component
            _emit(log, "error", "span::fail", failure)
            raise


__all__ = [
    "PRESETS",
    "SpanHandle",
    "configure",
    "get_logger",
    "record_event",
    "span",
]
