"""Shared pytest fixtures for selector scraper tests.

Fixture summary
---------------
settings      — ``Settings`` with defaults, independent of the host environment.
target_dir    — Temporary target directory containing no files yet.
write_setting — Helper writing ``setting.json`` into ``target_dir``.

All HTTP traffic is mocked with ``respx``; no test touches the network.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest

from selector_scraper.config.settings import Settings, get_settings


@pytest.fixture(autouse=True)
def _clear_settings_cache(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the host's ``TARGET_PATH`` and cached settings out of every test."""
    monkeypatch.delenv("TARGET_PATH", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def target_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "site"
    directory.mkdir()
    return directory


@pytest.fixture
def write_setting(target_dir: Path) -> Callable[[Any], Path]:
    def _write(content: Any) -> Path:
        path = target_dir / "setting.json"
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_text(json.dumps(content), encoding="utf-8")
        return path

    return _write
