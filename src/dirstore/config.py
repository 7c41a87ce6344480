"""Configuration utilities for DIRSTORE.

This module centralizes small helpers and constants related to configuration
read from the environment.
"""

import logging
import os
from pathlib import Path

ROOT_ENV_VAR = "DIRSTORE_ROOT"  # pragma: no mutate
BACKEND_ENV_VAR = "DIRSTORE_BACKEND"  # pragma: no mutate
LOG_LEVEL_ENV_VAR = "DIRSTORE_LOG_LEVEL"  # pragma: no mutate

DEFAULT_BACKEND = "local"
BACKENDS = ("local", "memory")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class RootDirNotSetError(Exception):
    """Raised when the DIRSTORE_ROOT environment variable is not set."""


class UnknownBackendError(ValueError):
    """Raised when a backend name is not one of `BACKENDS`."""

    def __init__(self, backend: str) -> None:
        super().__init__(
            f"Unknown file store backend '{backend}' (expected one of {', '.join(BACKENDS)})."
        )
        self.backend = backend


class UnknownLogLevelError(ValueError):
    """Raised when a log level name is not one of `LOG_LEVELS`."""

    def __init__(self, level: str) -> None:
        super().__init__(
            f"Unknown log level '{level}' (expected one of {', '.join(LOG_LEVELS)})."
        )
        self.level = level


def get_root_dir() -> Path:
    """Get the store root directory from the environment.

    The value is returned as given; stores resolve it to an absolute path
    themselves.

    Returns:
        The value of the `DIRSTORE_ROOT` environment variable as a `Path`.

    Raises:
        RootDirNotSetError: If `DIRSTORE_ROOT` is not set or empty.
    """
    if not (root := os.environ.get(ROOT_ENV_VAR)):
        raise RootDirNotSetError
    return Path(root)


def get_backend() -> str:
    """Get the store backend name from the environment.

    Returns:
        The lower-cased value of `DIRSTORE_BACKEND`, or `"local"` if unset.

    Raises:
        UnknownBackendError: If the value is not a supported backend.
    """
    backend = (os.environ.get(BACKEND_ENV_VAR) or DEFAULT_BACKEND).strip().lower()
    if backend not in BACKENDS:
        raise UnknownBackendError(backend)
    return backend


def get_log_level() -> int | None:
    """Get the store log level from the environment.

    Returns:
        The `logging` level named by `DIRSTORE_LOG_LEVEL`, or None if unset,
        meaning store logging stays off.

    Raises:
        UnknownLogLevelError: If the value is not a standard level name.
    """
    if not (value := os.environ.get(LOG_LEVEL_ENV_VAR, "").strip()):
        return None
    name = value.upper()
    if name not in LOG_LEVELS:
        raise UnknownLogLevelError(value)
    return logging.getLevelName(name)
