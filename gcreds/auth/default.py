"""Учётные данные приложения по умолчанию (Application Default Credentials)."""

from __future__ import annotations

import io
import os
from typing import Any, BinaryIO, Optional, Type, Union

from gcreds.logging import get_logger

from .errors import CredentialsError, ErrorKind
from .json_key import load_json_key_info
from .loader import (
    ACCOUNT_TYPE_VAR,
    CredentialsLoader,
    Scope,
    authorized_user_env_vars,
    service_account_env_vars,
)
from .service_account import ServiceAccountCredentials
from .user_refresh import UserRefreshCredentials

logger = get_logger(__name__)

SERVICE_ACCOUNT = "service_account"
AUTHORIZED_USER = "authorized_user"

Credentials = Union[ServiceAccountCredentials, UserRefreshCredentials]

VARIANTS = {
    SERVICE_ACCOUNT: ServiceAccountCredentials,
    AUTHORIZED_USER: UserRefreshCredentials,
}


def _variant_for(account_type: Any) -> Type[CredentialsLoader]:
    try:
        return VARIANTS[account_type]
    except (KeyError, TypeError) as error:
        raise CredentialsError(
            f"Неизвестный тип учётных данных: {account_type!r}",
            ErrorKind.PARSE_FAILURE,
            field="type",
            cause=error,
        ) from error


def _env_account_type() -> str:
    if ACCOUNT_TYPE_VAR in os.environ:
        return os.environ[ACCOUNT_TYPE_VAR]
    if not service_account_env_vars() and authorized_user_env_vars():
        return AUTHORIZED_USER
    return SERVICE_ACCOUNT


class DefaultCredentials(CredentialsLoader):
    """Выбирает вариант учётных данных по полю `type` ключа или по окружению."""

    @classmethod
    def make_creds(
        cls, json_key_io: Optional[BinaryIO] = None, scope: Scope = None
    ) -> Credentials:
        if json_key_io is None:
            account_type = _env_account_type()
            logger.debug("Тип учётных данных из окружения: %s", account_type)
            return _variant_for(account_type).make_creds(scope=scope)

        raw = json_key_io.read()
        info = load_json_key_info(io.BytesIO(raw))
        account_type = info.get("type", SERVICE_ACCOUNT)
        logger.debug("Тип учётных данных из ключа: %s", account_type)
        return _variant_for(account_type).make_creds(
            json_key_io=io.BytesIO(raw), scope=scope
        )


def get_application_default(scope: Scope = None) -> Optional[Credentials]:
    """Найти учётные данные по умолчанию.

    Порядок поиска: GOOGLE_APPLICATION_CREDENTIALS, переменные окружения
    с ключом или refresh-токеном, файл gcloud по стандартному пути.
    Возвращает None, если ни один источник не применим.
    """
    creds = DefaultCredentials.from_env(scope)
    if creds is None:
        creds = DefaultCredentials.from_well_known_path(scope)
    if creds is None:
        logger.warning("Учётные данные по умолчанию не найдены")
    return creds
