"""Загрузка конфигурации утилиты проверки адресов из переменных окружения."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import List, Sequence, Tuple

OUTPUT_FORMATS = ("text", "json")
PROJECTIONS = ("bare", "local", "domain")
_LIST_SEPARATORS = re.compile(r"[,;\n]")
TRUTHY_VALUES = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True)
class Settings:
    """Настройки утилиты jid-check. На правила разбора не влияют."""

    log_level: str
    output_format: str
    projections: Tuple[str, ...]
    fail_fast: bool


def _env(key: str, default: str = "") -> str:
    """Возвращает значение переменной окружения или значение по умолчанию."""
    return os.getenv(key, default).strip()


def _env_bool(key: str, default: bool = False) -> bool:
    value = _env(key)
    if not value:
        return default
    return value.lower() in TRUTHY_VALUES


def _env_list(key: str, default: Sequence[str] | None = None) -> List[str]:
    value = os.getenv(key)
    if value is None:
        return list(default or [])
    return [chunk.strip() for chunk in _LIST_SEPARATORS.split(value) if chunk.strip()]


def validate_output_format(value: str) -> str:
    normalized = value.lower()
    if normalized not in OUTPUT_FORMATS:
        raise ValueError(f"Неизвестный формат вывода: {value!r}")
    return normalized


def validate_projections(values: Sequence[str]) -> Tuple[str, ...]:
    normalized = tuple(value.lower() for value in values)
    unknown = [value for value in normalized if value not in PROJECTIONS]
    if unknown:
        raise ValueError(f"Неизвестные проекции: {', '.join(unknown)}")
    return normalized


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Загружает настройки один раз и кэширует их для повторного использования."""
    return Settings(
        log_level=_env("JID_LOG_LEVEL", "INFO").upper(),
        output_format=validate_output_format(_env("JID_OUTPUT_FORMAT", "text")),
        projections=validate_projections(_env_list("JID_PROJECTIONS", ["bare", "domain"])),
        fail_fast=_env_bool("JID_FAIL_FAST", False),
    )
