"""Logging utilities."""

from __future__ import annotations

import contextlib
import contextvars
import logging
from typing import Iterator

from rich.console import Console
from rich.logging import RichHandler


_source_var: contextvars.ContextVar[str] = contextvars.ContextVar("opmltree_source", default="-")


class _SourceFilter(logging.Filter):
    """Tag records with the input currently being converted."""

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: A003
        record.source = _source_var.get()  # type: ignore[attr-defined]
        return True


@contextlib.contextmanager
def conversion_context(*, source: str) -> Iterator[None]:
    """Bind `source` (an input path) to log records emitted inside the block."""

    token = _source_var.set(source)
    try:
        yield
    finally:
        _source_var.reset(token)


def configure_logging(level: str = "WARNING") -> None:
    """Send log records to stderr, leaving stdout to converted output.

    Calling it again only updates the level.

    Args:
        level: Logging level name.
    """

    root = logging.getLogger()
    root.setLevel(level.upper())
    if any(isinstance(h, RichHandler) for h in root.handlers):
        return

    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.addFilter(_SourceFilter())
    handler.setFormatter(logging.Formatter("%(source)s: %(message)s"))
    root.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Get a module logger."""

    return logging.getLogger(name)
