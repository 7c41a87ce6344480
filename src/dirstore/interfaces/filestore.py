"""Directory-scoped file store interface.

This module defines a minimal, backend-agnostic interface for creating,
reading, updating and deleting files that live directly inside a single root
directory. Files are addressed by a bare filename; no nesting, listing or
globbing semantics live here.

Key concepts:
    - **Flat namespace**: A filename names exactly one direct child of the root.
    - **Containment**: Names that would resolve outside the root are rejected
        with `InvalidFilename` before any storage access.
    - **Uniqueness**: `create()` never overwrites; it raises `AlreadyExists`.
    - **No implicit creation**: `read()`, `update()` and `delete()` raise
        `NotFound` for absent files.
    - **No held resources**: Each call acquires and releases its own handle.

Public API:
    - Exceptions (re-exported): `FileStoreError`, `InvalidFilename`,
        `AlreadyExists`, `NotFound`, `AccessDenied`, `StorageIOError`
    - Abstract interface: `AbstractFileStore`

Typical usage:
    ```py
    store.create("test.txt", b"Hello, world!")
    store.update("test.txt", b"Hello, Gopher!")
    data = store.read("test.txt")
    store.delete("test.txt")
    ```

Concurrency:
    - Concurrent `create()` calls on the same name have exactly one winner.
    - A `read()` concurrent with an `update()` may observe old, new or partial
      content; no stronger guarantee is made.
"""

import abc
import os
from pathlib import PurePath

from .errors import (
    AccessDenied,
    AlreadyExists,
    FileStoreError,
    InvalidFilename,
    NotFound,
    StorageIOError,
)

__all__ = [
    "AbstractFileStore",
    "AccessDenied",
    "AlreadyExists",
    "FileStoreError",
    "InvalidFilename",
    "NotFound",
    "PathLike",
    "StorageIOError",
    "content_bytes",
]

PathLike = str | os.PathLike[str]


def content_bytes(content: bytes) -> bytes:
    """Return an immutable copy of a bytes-like `content`.

    Raises:
        TypeError: If `content` is not bytes-like (e.g. `str` or `int`).
    """
    return bytes(memoryview(content))


class AbstractFileStore(abc.ABC):
    """CRUD over the files directly inside one root directory."""

    @property
    @abc.abstractmethod
    def root(self) -> PurePath:
        """Absolute root directory path, fixed at construction."""

    # --- Core Operations ---

    @abc.abstractmethod
    def create(self, filename: str, content: bytes) -> None:
        """Create a new file holding `content`.

        Args:
            filename (str): Bare filename (no separators).
            content (bytes): Bytes to store verbatim.

        Raises:
            InvalidFilename: If `filename` is not a valid bare filename.
            TypeError: If `content` is not bytes-like. Nothing is written.
            AlreadyExists: If the file is already present. Existing content
                is left untouched.
            AccessDenied: If the OS refuses the write.
            StorageIOError: For any other underlying I/O failure.
        """

    @abc.abstractmethod
    def read(self, filename: str) -> bytes:
        """Return the full content of an existing file.

        Args:
            filename (str): Bare filename (no separators).

        Returns:
            bytes: The file's content at the moment of the call.

        Raises:
            InvalidFilename: If `filename` is not a valid bare filename.
            NotFound: If the file is absent.
            AccessDenied: If the OS refuses the read.
            StorageIOError: For any other underlying I/O failure.
        """

    @abc.abstractmethod
    def update(self, filename: str, content: bytes) -> None:
        """Replace the entire content of an existing file.

        Args:
            filename (str): Bare filename (no separators).
            content (bytes): New content; old content is discarded.

        Raises:
            InvalidFilename: If `filename` is not a valid bare filename.
            TypeError: If `content` is not bytes-like. The existing content
                is left untouched.
            NotFound: If the file is absent. It is never created implicitly.
            AccessDenied: If the OS refuses the write.
            StorageIOError: For any other underlying I/O failure.
        """

    @abc.abstractmethod
    def delete(self, filename: str) -> None:
        """Remove an existing file.

        Not idempotent: deleting an absent file raises `NotFound`.

        Args:
            filename (str): Bare filename (no separators).

        Raises:
            InvalidFilename: If `filename` is not a valid bare filename.
            NotFound: If the file is absent.
            AccessDenied: If the OS refuses the removal.
            StorageIOError: For any other underlying I/O failure.
        """

    @abc.abstractmethod
    def exists(self, filename: str) -> bool:
        """Return True if `filename` is present, without reading its body.

        Directories and other non-regular entries are not files and report False.

        Raises:
            InvalidFilename: If `filename` is not a valid bare filename.
            StorageIOError: If the root directory itself is missing.
        """

    # --- Convenience methods (non-abstract) ---

    def create_text(self, filename: str, text: str, encoding: str = "utf-8") -> None:
        """Create a new file holding `text` encoded with `encoding`."""
        self.create(filename, text.encode(encoding))

    def read_text(self, filename: str, encoding: str = "utf-8") -> str:
        """Read an existing file and decode it with `encoding`."""
        return self.read(filename).decode(encoding)

    def update_text(self, filename: str, text: str, encoding: str = "utf-8") -> None:
        """Replace an existing file's content with `text` encoded with `encoding`."""
        self.update(filename, text.encode(encoding))
