"""Pytest fixtures for directory-scoped filestore contract tests.

Provided fixtures
-----------------
- **store**: Parametrized backend factory that returns a **fresh**
  `AbstractFileStore` per test. Currently supports `"memory"` (the in-memory
  implementation) and `"local"` (a `LocalFileStore` rooted in `tmp_path`).
  To exercise additional backends later, add their keys to the `params` list
  and branch in the fixture body.

- **arbitrary_bytes**: Small, deterministic byte sample useful for smoke tests
  and quick round-trips.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from dirstore.adapters.filestore.local import LocalFileStore
from dirstore.adapters.filestore.memory import MemoryFileStore

if TYPE_CHECKING:
    from dirstore.interfaces.filestore import AbstractFileStore


@pytest.fixture(params=["memory", "local"])
def store(request: pytest.FixtureRequest, tmp_path: Path) -> AbstractFileStore:
    """Return a fresh filestore instance for the requested backend.

    Current params:
      - `"memory"` → `MemoryFileStore` (non-durable, in-memory)
      - `"local"`  → `LocalFileStore` rooted at an existing, empty directory

    Each invocation yields a brand-new store instance for isolation.
    """

    match request.param:
        case "memory":
            return MemoryFileStore()
        case "local":
            root = tmp_path / "filestore"
            root.mkdir()
            return LocalFileStore(root)
        case _:
            raise ValueError(f"unknown store type: {request.param}")


@pytest.fixture
def arbitrary_bytes() -> bytes:
    """Deterministic sample payload for quick round-trip tests."""
    return b"The quick brown fox jumps over the lazy dog"
