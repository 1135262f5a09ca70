"""Shared fixtures: keep renders independent of the caller's environment."""

from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("PI_TABLE_WIDTH", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)
