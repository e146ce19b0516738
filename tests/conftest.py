from __future__ import annotations

import pytest

from dataPackage.config import CONFIG_ENV, RESOLVE_BASE_ENV
from dataPackage.kg.iri import DEFAULT_RESOLVE_BASE


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep user settings from leaking into tests."""

    monkeypatch.delenv(CONFIG_ENV, raising=False)
    monkeypatch.delenv(RESOLVE_BASE_ENV, raising=False)


@pytest.fixture
def base() -> str:
    return DEFAULT_RESOLVE_BASE
