"""Общие фикстуры для тестов."""

import json
from pathlib import Path
from typing import Dict, Iterator, List

import pytest

from jid.config import get_settings

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"


@pytest.fixture(autouse=True)
def default_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Фиксирует переменные окружения утилиты и сбрасывает кэш настроек."""
    monkeypatch.setenv("JID_LOG_LEVEL", "INFO")
    monkeypatch.setenv("JID_OUTPUT_FORMAT", "text")
    monkeypatch.setenv("JID_PROJECTIONS", "bare,domain")
    monkeypatch.setenv("JID_FAIL_FAST", "false")
    get_settings.cache_clear()  # type: ignore[attr-defined]
    yield
    get_settings.cache_clear()  # type: ignore[attr-defined]


@pytest.fixture
def canonical_addresses() -> List[str]:
    """Адреса, которые уже находятся в канонической форме."""
    path = FIXTURES_DIR / "addresses.json"
    with path.open(encoding="utf-8") as handle:
        return json.load(handle)["canonical"]


@pytest.fixture
def normalized_addresses() -> List[Dict[str, str]]:
    """Пары вход -> ожидаемая каноническая форма."""
    path = FIXTURES_DIR / "addresses.json"
    with path.open(encoding="utf-8") as handle:
        return json.load(handle)["normalized"]
