"""Exceptions raised by file store operations.

Every error carries the offending ``filename`` so callers can report or react
without parsing messages. Underlying ``OSError`` instances are chained as
``__cause__`` by the adapters.
"""


class FileStoreError(Exception):
    """Base class for file store errors.

    Attributes:
        filename (str): The filename the failing operation addressed.
    """

    def __init__(self, filename: str, message: str):
        super().__init__(message)
        self.filename = filename


class InvalidFilename(FileStoreError, ValueError):
    """Filename is empty, contains separators, or escapes the root directory.

    Attributes:
        filename (str): The rejected filename.
        reason (str): Short description of the violated rule.
    """

    def __init__(self, filename: str, reason: str):
        super().__init__(filename, f"Invalid filename {filename!r}: {reason}.")
        self.reason = reason


class AlreadyExists(FileStoreError):
    """Create target is already present in the store."""

    def __init__(self, filename: str):
        super().__init__(filename, f"File '{filename}' already exists.")


class NotFound(FileStoreError):
    """Read, update or delete target is absent from the store."""

    def __init__(self, filename: str):
        super().__init__(filename, f"File '{filename}' not found.")


class AccessDenied(FileStoreError):
    """The operating system refused access to the file."""

    def __init__(self, filename: str):
        super().__init__(filename, f"Access to file '{filename}' denied.")


class StorageIOError(FileStoreError):
    """Any other underlying filesystem failure (disk full, missing root, ...).

    Attributes:
        filename (str): The filename the failing operation addressed.
        detail (str): Description of the underlying failure.
    """

    def __init__(self, filename: str, detail: str):
        super().__init__(filename, f"I/O error on file '{filename}': {detail}")
        self.detail = detail
