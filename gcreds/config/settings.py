"""Загрузка конфигурации утилиты из `.env` и переменных окружения."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

from dotenv import load_dotenv


@dataclass(frozen=True)
class Settings:
    """Собранные настройки утилиты."""

    log_level: str = "INFO"
    scopes: Tuple[str, ...] = field(default_factory=tuple)
    verify_token: bool = False
    retry_attempts: int = 3
    retry_max_delay: float = 10.0

    @property
    def scope(self) -> Union[None, str, Tuple[str, ...]]:
        """Scope в том виде, в котором его принимает поиск учётных данных."""
        if not self.scopes:
            return None
        if len(self.scopes) == 1:
            return self.scopes[0]
        return self.scopes

    @classmethod
    def load(cls) -> "Settings":
        """Загрузить конфигурацию из `.env` и переменных окружения.

        `.env` может задавать и переменные поиска (GOOGLE_APPLICATION_CREDENTIALS
        и др.), поэтому загрузка выполняется до обращения к учётным данным.
        """
        load_dotenv()

        return cls(
            log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
            scopes=_parse_scopes(os.getenv("GOOGLE_AUTH_SCOPES", "")),
            verify_token=_env_flag("GOOGLE_AUTH_VERIFY_TOKEN", False),
            retry_attempts=_get_int_env("GOOGLE_AUTH_RETRY_ATTEMPTS", default=3),
            retry_max_delay=_get_float_env("GOOGLE_AUTH_RETRY_MAX_DELAY", default=10.0),
        )


def _env_flag(name: str, default: bool = True) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "y", "on"}


def _parse_scopes(raw_value: str) -> Tuple[str, ...]:
    return tuple(scope.strip() for scope in raw_value.split(",") if scope.strip())


def _raw_number(name: str) -> Optional[str]:
    raw_value = os.getenv(name)
    if raw_value is None or raw_value.strip() == "":
        return None
    return raw_value.strip()


def _get_int_env(name: str, *, default: int) -> int:
    """Получить целое значение из переменной окружения."""
    raw_value = _raw_number(name)
    if raw_value is None:
        return default
    try:
        return int(raw_value)
    except ValueError as error:
        raise ValueError(f"Некорректное числовое значение для переменной {name}") from error


def _get_float_env(name: str, *, default: float) -> float:
    raw_value = _raw_number(name)
    if raw_value is None:
        return default
    try:
        return float(raw_value)
    except ValueError as error:
        raise ValueError(f"Некорректное числовое значение для переменной {name}") from error
