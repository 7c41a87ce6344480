"""In-memory directory-scoped file store backend.

This module provides a tiny, dependency-free store implementation meant for
**tests**, examples, and throwaway usage. Files are kept entirely in RAM in a
dict keyed by filename. There is no persistence across process restarts.

Exports
-------
- MemoryFileStore: Concrete `AbstractFileStore` backed by an in-memory dict.

Key behaviors
-------------
- **Same contract as the local backend**: filenames are validated with the
  same rules (`InvalidFilename`), `create()` never overwrites (`AlreadyExists`),
  and `read()`/`update()`/`delete()` never create (`NotFound`).
- **Thread-safety**: All lookups and mutations happen under an `RLock`, so each
  operation is atomic with respect to the others.
- **Virtual root**: `root` is only used in messages and `repr()`; nothing is
  ever written to disk.

Typical usage
-------------
    store = MemoryFileStore()
    store.create("test.txt", b"Hello, world!")
    store.read("test.txt")  # b"Hello, world!"
"""

from __future__ import annotations

import logging
import threading
from pathlib import PurePosixPath

from dirstore.interfaces.errors import AlreadyExists, NotFound
from dirstore.interfaces.filenames import validate_filename
from dirstore.interfaces.filestore import AbstractFileStore, content_bytes

__all__ = ["MemoryFileStore"]

logger = logging.getLogger(__name__)


class MemoryFileStore(AbstractFileStore):
    """In-memory directory-scoped file store backend.

    Stores file contents **entirely in RAM**, addressed by bare filename. This
    backend is intended for tests, examples, and local development; it is
    **non-durable** (data is lost when the process exits).

    Thread-safety & atomicity
    -------------------------
    All operations are protected by a reentrant lock, so concurrent callers are
    safe. Concurrent `create()` calls on the same filename have exactly one
    winner; the others raise `AlreadyExists`.

    Errors
    ------
    - `InvalidFilename`: the filename breaks the shared filename rules.
    - `AlreadyExists`: `create()` on a present filename.
    - `NotFound`: `read()`/`update()`/`delete()` on an absent filename.
    """

    def __init__(self, root: str = "/") -> None:
        self._root = PurePosixPath(root)
        self._files: dict[str, bytes] = {}
        self._lock = threading.RLock()

    @property
    def root(self) -> PurePosixPath:
        return self._root

    def __repr__(self) -> str:
        return f"{type(self).__name__}(root={str(self._root)!r})"

    # ---- AbstractFileStore ----

    def create(self, filename: str, content: bytes) -> None:
        validate_filename(filename)
        data = content_bytes(content)
        with self._lock:
            if filename in self._files:
                raise AlreadyExists(filename)
            self._files[filename] = data
        logger.debug("Created mem:%s (%d bytes)", filename, len(data))

    def read(self, filename: str) -> bytes:
        validate_filename(filename)
        with self._lock:
            try:
                data = self._files[filename]
            except KeyError as e:
                raise NotFound(filename) from e
        logger.debug("Read mem:%s (%d bytes)", filename, len(data))
        return data

    def update(self, filename: str, content: bytes) -> None:
        validate_filename(filename)
        data = content_bytes(content)
        with self._lock:
            if filename not in self._files:
                raise NotFound(filename)
            self._files[filename] = data
        logger.debug("Updated mem:%s (%d bytes)", filename, len(data))

    def delete(self, filename: str) -> None:
        validate_filename(filename)
        with self._lock:
            try:
                del self._files[filename]
            except KeyError as e:
                raise NotFound(filename) from e
        logger.debug("Deleted mem:%s", filename)

    def exists(self, filename: str) -> bool:
        validate_filename(filename)
        with self._lock:
            return filename in self._files
