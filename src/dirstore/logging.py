"""Logging setup for the `dirstore` logger hierarchy.

Store adapters emit one DEBUG record per successful operation and never log
failures. Host programs that want to see those records opt in through
`install_handlers` (or `dirstore.bootstrap.bootstrap.enable_logging`), which
attaches up to two handlers to the `dirstore` logger:

- a Rich console handler on stderr, tagging each record with the backend or
  module that produced it (e.g. ``[local]``, ``[memory]``);
- an operation journal: a memory-buffered file handler that collects the
  DEBUG operation records and writes them out when the buffer fills, when a
  WARNING arrives, or when the handlers are removed.

`remove_handlers` detaches and closes everything `install_handlers` attached,
flushing the journal.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from logging import Logger

    from dirstore.interfaces.filestore import AbstractFileStore, PathLike

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "dirstore"

_installed: list[logging.Handler] = []


class ComponentTagFilter(logging.Filter):
    """Tag each record with the short name of the component that logged it.

    Sets `record.tag` to the last segment of the logger name in brackets, so
    `dirstore.adapters.filestore.local` becomes "[local]". Records from
    loggers outside the `dirstore` hierarchy keep their top-level package,
    e.g. "[urllib3]". Always lets the record through.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith(PROJECT_PREFIX):
            record.tag = f"[{record.name.rsplit('.', 1)[-1]}]"
        else:
            record.tag = f"[{record.name.split('.')[0]}]"
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Build a RichHandler on stderr for store records.

    Store operations are logged at DEBUG, so `level` must be DEBUG for them to
    appear; `debug_mode` forces that and adds timestamps and source paths.

    Args:
        level: Minimum level shown (overridden to DEBUG in debug_mode).
        debug_mode: Show timestamps, logger names and source locations.
        color: Enable color output when True.

    Returns:
        RichHandler: Handler tagged with `ComponentTagFilter`.
    """
    ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]
    color_system: ColorSystem | None = "auto" if color else None

    if debug_mode:
        level = logging.DEBUG

    handler = RichHandler(
        level=level,
        console=Console(color_system=color_system, stderr=True),
        rich_tracebacks=True,
        show_time=debug_mode,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    handler.setFormatter(
        logging.Formatter(
            "%(tag)s %(message)s" if not debug_mode else "%(name)s %(tag)s %(message)s"
        )
    )
    handler.addFilter(ComponentTagFilter())
    return handler


def config_operation_journal(
    path: PathLike,
    capacity: int = 500,
    flush_level: int = logging.WARNING,
) -> MemoryHandler:
    """Build a buffered journal of store operations written to `path`.

    Records are kept in memory and appended to `path` when `capacity` records
    have accumulated, when a record at `flush_level` or above arrives, or when
    the handler is closed.

    Args:
        path: Journal file; opened for append so journals survive restarts.
        capacity: Number of records buffered before writing.
        flush_level: Level at or above which the buffer is written at once.

    Returns:
        MemoryHandler: Buffering handler whose target is a FileHandler.
    """
    file_handler = logging.FileHandler(path, mode="a", encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s [%(threadName)s] %(name)s: %(message)s")
    )

    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=file_handler,
        flushOnClose=True,
    )


def install_handlers(*handlers: logging.Handler) -> Logger:
    """Attach `handlers` to the `dirstore` logger, replacing earlier installs.

    The logger level is lowered to the most verbose handler's level so store
    DEBUG records reach handlers that want them.

    Returns:
        Logger: The `dirstore` logger.
    """
    remove_handlers()

    logger = logging.getLogger(PROJECT_PREFIX)
    for handler in handlers:
        logger.addHandler(handler)
        _installed.append(handler)

    if handlers:
        logger.setLevel(min(h.level or logging.DEBUG for h in handlers))
    return logger


def remove_handlers() -> None:
    """Detach and close the handlers added by `install_handlers`.

    Buffered journal records are written out before the file is closed.
    """
    logger = logging.getLogger(PROJECT_PREFIX)
    while _installed:
        handler = _installed.pop()
        logger.removeHandler(handler)
        target = getattr(handler, "target", None)
        handler.close()  # MemoryHandler flushes into target here
        if target is not None:
            target.close()
    logger.setLevel(logging.NOTSET)


def log_startup(logger: Logger, *, app_version: str, store: AbstractFileStore) -> None:
    """Log a one-line store summary and DEBUG diagnostics.

    Args:
        logger: Logger used to emit startup messages.
        app_version: DIRSTORE version string to display.
        store: The store the host program is about to use.
    """
    logger.info("DIRSTORE %s, store=%r", app_version, store)

    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("PID: %s", os.getpid())
    logger.debug("CWD: %s", Path.cwd())
    logger.debug(
        "Handlers: %s", [type(h).__name__ for h in logging.getLogger(PROJECT_PREFIX).handlers]
    )
