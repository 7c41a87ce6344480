"""Local filesystem-based directory-scoped file store adapter."""

import contextlib
import logging
import os
from collections.abc import Iterator
from pathlib import Path

from dirstore.interfaces.errors import (
    AccessDenied,
    AlreadyExists,
    InvalidFilename,
    NotFound,
    StorageIOError,
)
from dirstore.interfaces.filenames import validate_filename
from dirstore.interfaces.filestore import AbstractFileStore, PathLike, content_bytes

logger = logging.getLogger(__name__)

# Write-only, no create: the update target must already exist.
_UPDATE_FLAGS = os.O_WRONLY | os.O_TRUNC | getattr(os, "O_BINARY", 0)


class LocalFileStore(AbstractFileStore):
    """FileStore implementation confined to one directory on the local filesystem.

    The root is resolved to an absolute path once, at construction, and reused
    for every operation; later changes to the working directory have no effect.
    The root need not exist yet unless `create` is True, in which case it is
    created (with parents).
    """

    def __init__(self, root: PathLike, *, create: bool = False) -> None:
        self._root = Path(root).resolve()
        if create:
            self._root.mkdir(parents=True, exist_ok=True)

    @property
    def root(self) -> Path:
        return self._root

    def __repr__(self) -> str:
        return f"{type(self).__name__}(root={str(self._root)!r})"

    # --- Core Operations ---

    def create(self, filename: str, content: bytes) -> None:
        path = self._resolve_path(filename)
        data = content_bytes(content)

        with self._translate_os_errors(filename):
            # "x" mode maps to O_CREAT | O_EXCL, so an existing file is never touched
            fileobj = path.open("xb")
            try:
                with fileobj:
                    fileobj.write(data)
            except BaseException:
                # don't leave a truncated file behind
                with contextlib.suppress(OSError):
                    path.unlink()
                raise

        logger.debug("Created %s (%d bytes)", path, len(data))

    def read(self, filename: str) -> bytes:
        path = self._resolve_path(filename)

        with self._translate_os_errors(filename):
            with path.open("rb") as fileobj:
                data = fileobj.read()

        logger.debug("Read %s (%d bytes)", path, len(data))
        return data

    def update(self, filename: str, content: bytes) -> None:
        path = self._resolve_path(filename)
        # checked before O_TRUNC empties the file
        data = content_bytes(content)

        with self._translate_os_errors(filename):
            fd = os.open(path, _UPDATE_FLAGS)
            with open(fd, "wb") as fileobj:
                fileobj.write(data)

        logger.debug("Updated %s (%d bytes)", path, len(data))

    def delete(self, filename: str) -> None:
        path = self._resolve_path(filename)

        with self._translate_os_errors(filename):
            path.unlink()

        logger.debug("Deleted %s", path)

    # --- Convenience Methods ---

    def exists(self, filename: str) -> bool:
        path = self._resolve_path(filename)
        if path.is_file():
            return True
        if not self._root.is_dir():
            raise self._missing_root_error(filename)
        return False

    # --- Internal Helpers ---

    def _resolve_path(self, filename: str) -> Path:
        """Determine the filesystem path for a given filename.

        The filename is joined to the root and normalised; the result must be a
        direct child of the root. This is the only place where platform path
        semantics (separators, drives, `..`) are interpreted.

        Raises:
            InvalidFilename: If the filename is invalid or escapes the root.
        """
        validate_filename(filename)

        path = Path(os.path.normpath(os.path.join(self._root, filename)))
        if path.parent != self._root or path == self._root:
            raise InvalidFilename(filename, "filename resolves outside the root directory")

        return path

    def _missing_root_error(self, filename: str) -> StorageIOError:
        return StorageIOError(
            filename, f"root directory {str(self._root)!r} does not exist"
        )

    @contextlib.contextmanager
    def _translate_os_errors(self, filename: str) -> Iterator[None]:
        """Re-raise OS errors as file store errors for `filename`."""
        try:
            yield
        except FileExistsError as e:
            raise AlreadyExists(filename) from e
        except FileNotFoundError as e:
            if not self._root.is_dir():
                raise self._missing_root_error(filename) from e
            raise NotFound(filename) from e
        except PermissionError as e:
            raise AccessDenied(filename) from e
        except OSError as e:
            raise StorageIOError(filename, e.strerror or str(e)) from e
