"""Platform-neutral filename validation shared by all file store backends."""

import os

from .errors import InvalidFilename

# Both separators are rejected on every platform.
SEPARATORS = frozenset({"/", "\\", os.sep} | ({os.altsep} if os.altsep else set()))
RESERVED_NAMES = frozenset({".", ".."})


def validate_filename(filename: str) -> str:
    """Return ``filename`` unchanged if it names a direct child of a root.

    Enforced:
    - Must be a non-empty ``str``
    - No path separators (``/`` or ``\\``)
    - Not ``.`` or ``..``
    - No NUL characters

    Args:
        filename: Caller-supplied bare filename.

    Returns:
        str: The validated filename.

    Raises:
        InvalidFilename: If any rule is violated.
    """
    if not isinstance(filename, str):
        raise InvalidFilename(repr(filename), "filename must be a string")

    if not filename:
        raise InvalidFilename(filename, "filename is empty")

    if any(sep in filename for sep in SEPARATORS):
        raise InvalidFilename(filename, "filename contains a path separator")

    if filename in RESERVED_NAMES:
        raise InvalidFilename(filename, "filename is a directory reference")

    if "\x00" in filename:
        raise InvalidFilename(filename, "filename contains a NUL character")

    return filename
