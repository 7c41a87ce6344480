"""DIRSTORE

A small library for creating, reading, updating and deleting files that live
directly inside one root directory. Filenames are validated and confined to
the root; the filesystem itself is the only state.
"""

from dirstore.adapters.filestore.local import LocalFileStore
from dirstore.adapters.filestore.memory import MemoryFileStore
from dirstore.interfaces.errors import (
    AccessDenied,
    AlreadyExists,
    FileStoreError,
    InvalidFilename,
    NotFound,
    StorageIOError,
)
from dirstore.interfaces.filestore import AbstractFileStore

__all__ = [
    "AbstractFileStore",
    "AccessDenied",
    "AlreadyExists",
    "FileStoreError",
    "InvalidFilename",
    "LocalFileStore",
    "MemoryFileStore",
    "NotFound",
    "StorageIOError",
    "__version__",
]
__version__ = "0.1.0"
