"""Pytest configuration for ahc-vdsl."""

from __future__ import annotations

import pytest

from ahc_vdsl import config

_ENV_VARS = (
    config.CONFIG_ENV,
    config.ENABLED_ENV,
    config.OUTPUT_ENV,
    config.MODE_ENV,
)


@pytest.fixture(autouse=True)
def _clean_vis_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
