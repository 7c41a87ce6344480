"""Global pytest fixtures for DIRSTORE."""

from __future__ import annotations

import pytest

from dirstore import config


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the host's DIRSTORE_* variables from leaking into tests."""
    monkeypatch.delenv(config.ROOT_ENV_VAR, raising=False)
    monkeypatch.delenv(config.BACKEND_ENV_VAR, raising=False)
    monkeypatch.delenv(config.LOG_LEVEL_ENV_VAR, raising=False)
