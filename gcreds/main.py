"""Точка входа: найти учётные данные по умолчанию и при необходимости проверить токен."""

from __future__ import annotations

import logging

from google.auth.exceptions import GoogleAuthError
from google.auth.transport.requests import Request

from gcreds.auth import (
    CredentialsError,
    ServiceAccountCredentials,
    get_application_default,
)
from gcreds.auth.default import Credentials
from gcreds.config import Settings
from gcreds.logging import configure_logging, get_logger
from gcreds.utils.retry import create_retrying


def describe(credentials: Credentials) -> str:
    """Короткое описание найденных учётных данных без секретов."""
    if isinstance(credentials, ServiceAccountCredentials):
        return f"сервисный аккаунт {credentials.issuer}"
    return f"пользователь OAuth2 (client_id {credentials.client_id})"


def verify_token(credentials: Credentials, settings: Settings) -> None:
    """Запросить access token через google-auth с повторами при сетевых сбоях."""
    logger = get_logger(__name__)
    retryer = create_retrying(
        name="Запрос токена",
        logger=logger,
        attempts=settings.retry_attempts,
        max_delay=settings.retry_max_delay,
    )
    retryer(credentials.refresh, Request())
    logger.info("Access token получен, валиден: %s", credentials.valid)


def main() -> None:
    """Запустить поиск учётных данных с инициализацией конфигурации и логированием."""
    configure_logging("INFO")
    logger = get_logger(__name__)

    try:
        settings = Settings.load()
    except ValueError as error:
        logger.error("Ошибка загрузки конфигурации: %s", error)
        raise

    logging.getLogger().setLevel(settings.log_level)

    try:
        credentials = get_application_default(settings.scope)
    except CredentialsError as error:
        stage = error.source.value if error.source else "-"
        logger.error("Сбой на этапе %s (%s): %s", stage, error.kind.value, error)
        raise SystemExit(1) from error

    if credentials is None:
        raise SystemExit(1)

    logger.info("Найдены учётные данные: %s", describe(credentials))

    if settings.verify_token:
        try:
            verify_token(credentials, settings)
        except GoogleAuthError as error:
            logger.error("Не удалось получить access token: %s", error)
            raise SystemExit(1) from error


if __name__ == "__main__":
    main()
