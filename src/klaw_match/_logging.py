"""structlog setup for klaw-match.

Library code only asks for loggers; nothing is printed until an application
calls `configure_logging()` (directly or via `init(log_level=...)`). The
backend selector is the main producer: it reports which matcher strategy was
committed and why the native one was skipped.

Entries from stdlib loggers and structlog loggers go through the same
`ProcessorFormatter`, so both render as JSON (or console lines) on stderr.
Hooks see every structlog entry before rendering, whatever the level.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from typing import Any, TextIO

import structlog

__all__ = [
    'LogHook',
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    'get_logger',
    'remove_log_hook',
]

type LogHook = Callable[[dict[str, Any]], None]

_log_hooks: list[LogHook] = []


def _run_log_hooks(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Processor handing a copy of each entry to the registered hooks."""
    for hook in tuple(_log_hooks):
        try:
            hook(dict(event_dict))
        except Exception:  # noqa: S112
            continue
    return event_dict


def _pre_chain() -> list[Any]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        _run_log_hooks,
    ]


def configure_logging(
    level: str = 'INFO',
    *,
    json_output: bool = True,
    stream: TextIO | None = None,
) -> None:
    """Route klaw-match (and all stdlib) logging through structlog.

    Replaces the root logger's handlers, so calling it again reconfigures
    rather than duplicating output.

    Args:
        level: "DEBUG", "INFO", "WARNING", "ERROR" or "CRITICAL" (any case).
        json_output: JSON lines if True, otherwise human-readable console output.
        stream: Where to write. Defaults to stderr.
    """
    out = stream if stream is not None else sys.stderr

    structlog.configure(
        processors=[
            *_pre_chain(),
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    if json_output:
        renderer: Any = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=out.isatty())

    handler = logging.StreamHandler(out)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_pre_chain(),
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))


def get_logger(name: str | None = None) -> Any:
    """Return a structlog logger bound lazily to the current configuration."""
    return structlog.get_logger(name)


def add_log_hook(hook: LogHook) -> None:
    """Call `hook` with a copy of every log entry.

    A hook that raises is skipped for that entry; logging carries on.
    """
    _log_hooks.append(hook)


def remove_log_hook(hook: LogHook) -> None:
    """Unregister `hook`. Unknown hooks are ignored."""
    if hook in _log_hooks:
        _log_hooks.remove(hook)


def clear_log_hooks() -> None:
    _log_hooks.clear()
