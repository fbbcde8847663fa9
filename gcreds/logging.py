"""Настройки логирования для утилиты поиска учётных данных."""

import logging
from typing import Optional

# Транспорт google-auth на уровне DEBUG пишет заголовки запросов к token endpoint.
_TRANSPORT_LOGGERS = ("urllib3", "google.auth.transport")


def configure_logging(level: str) -> None:
    """Инициализировать стандартное логирование с заданным уровнем."""
    normalized_level = level.upper() if level else "INFO"
    numeric_level = getattr(logging, normalized_level, logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    for name in _TRANSPORT_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric_level, logging.WARNING))


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Вернуть логгер с заданным именем."""
    return logging.getLogger(name if name else "gcreds")
