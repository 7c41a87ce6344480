"""Build a file store from explicit arguments or the environment."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from dirstore import __version__, config
from dirstore import logging as dirstore_logging
from dirstore.adapters.filestore.local import LocalFileStore
from dirstore.adapters.filestore.memory import MemoryFileStore

if TYPE_CHECKING:
    from dirstore.interfaces.filestore import AbstractFileStore, PathLike

logger = logging.getLogger(__name__)


def build_local_filestore(root: PathLike, *, create: bool = False) -> LocalFileStore:
    """Build a store confined to `root` on the local filesystem."""
    return LocalFileStore(root, create=create)


def build_memory_filestore() -> MemoryFileStore:
    """Build a fresh, empty in-memory store."""
    return MemoryFileStore()


def build_filestore(
    root: PathLike | None = None,
    *,
    backend: str | None = None,
    create: bool = False,
) -> AbstractFileStore:
    """Build the configured file store.

    Args:
        root: Root directory for the local backend. Falls back to
            `DIRSTORE_ROOT` when omitted. Ignored by the memory backend.
        backend: `"local"` or `"memory"`. Falls back to `DIRSTORE_BACKEND`,
            then `"local"`.
        create: Create the local root directory if it is missing.

    Returns:
        AbstractFileStore: The wired store.

    Raises:
        RootDirNotSetError: If the local backend is selected and no root is
            given or configured.
        UnknownBackendError: If the backend name is not supported.
    """
    if backend is None:
        backend = config.get_backend()
    elif backend not in config.BACKENDS:
        raise config.UnknownBackendError(backend)

    if backend == "memory":
        store: AbstractFileStore = build_memory_filestore()
    else:
        store = build_local_filestore(
            root if root is not None else config.get_root_dir(), create=create
        )

    logger.debug("Built %r", store)
    return store


def enable_logging(
    store: AbstractFileStore,
    *,
    level: int | None = None,
    debug_mode: bool = False,
    color: bool = True,
    journal_path: PathLike | None = None,
) -> list[logging.Handler]:
    """Attach console and journal handlers to the `dirstore` logger.

    Store logging is off until a host program calls this. Store operations
    log at DEBUG, so they reach the console only when `level` is DEBUG (or
    `debug_mode` is set); the journal, when given, records them at any level.
    Calling again replaces the previous handlers. Undo with
    `dirstore.logging.remove_handlers`.

    Args:
        store: The store being used; named in the startup summary.
        level: Console level. Falls back to `DIRSTORE_LOG_LEVEL`, then INFO.
        debug_mode: Force DEBUG and show timestamps and source paths.
        color: Enable color console output.
        journal_path: Optional file for the buffered operation journal.

    Returns:
        list[logging.Handler]: The handlers now installed.

    Raises:
        UnknownLogLevelError: If `DIRSTORE_LOG_LEVEL` names no known level.
    """
    if level is None:
        level = config.get_log_level() or logging.INFO

    handlers: list[logging.Handler] = [
        dirstore_logging.config_console_handler(level=level, debug_mode=debug_mode, color=color)
    ]
    if journal_path is not None:
        handlers.append(dirstore_logging.config_operation_journal(journal_path))

    project_logger = dirstore_logging.install_handlers(*handlers)
    dirstore_logging.log_startup(project_logger, app_version=__version__, store=store)
    return handlers
