"""Поиск учётных данных по умолчанию в окружении и на файловой системе."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, BinaryIO, Optional, Sequence, Union

from gcreds.logging import get_logger

from . import host
from .errors import CredentialSource, CredentialsError, classify
from .json_key import CLIENT_EMAIL_VAR, PRIVATE_KEY_VAR

logger = get_logger(__name__)

ENV_VAR = "GOOGLE_APPLICATION_CREDENTIALS"

CLIENT_ID_VAR = "GOOGLE_CLIENT_ID"
CLIENT_SECRET_VAR = "GOOGLE_CLIENT_SECRET"
REFRESH_TOKEN_VAR = "GOOGLE_REFRESH_TOKEN"
ACCOUNT_TYPE_VAR = "GOOGLE_ACCOUNT_TYPE"

NOT_FOUND_ERROR = f"Не удалось прочитать файл учётных данных, указанный в {ENV_VAR}"
WELL_KNOWN_PATH = "gcloud/application_default_credentials.json"
WELL_KNOWN_ERROR = "Не удалось прочитать файл учётных данных по умолчанию"

Scope = Union[None, str, Sequence[str]]


def service_account_env_vars() -> bool:
    return all(name in os.environ for name in (PRIVATE_KEY_VAR, CLIENT_EMAIL_VAR))


def authorized_user_env_vars() -> bool:
    return all(
        name in os.environ
        for name in (CLIENT_ID_VAR, CLIENT_SECRET_VAR, REFRESH_TOKEN_VAR)
    )


def well_known_path() -> Path:
    """Путь к файлу gcloud application_default_credentials для текущей ОС."""
    windows = host.is_windows()
    root = os.environ.get("APPDATA" if windows else "HOME", "")
    base = Path(WELL_KNOWN_PATH) if windows else Path(".config") / WELL_KNOWN_PATH
    # Пустой корень даёт путь от корня файловой системы.
    return Path(root or os.sep) / base


def _wrap(prefix: str, source: CredentialSource, error: Exception) -> CredentialsError:
    field = error.field if isinstance(error, CredentialsError) else None
    return CredentialsError(
        f"{prefix}: {error}",
        classify(error),
        source=source,
        field=field,
        cause=error,
    )


class CredentialsLoader:
    """Общий алгоритм поиска учётных данных.

    Наследники определяют, как из потока с JSON-ключом и набора scope
    получается объект учётных данных, переопределяя `make_creds`.
    """

    @classmethod
    def make_creds(
        cls, json_key_io: Optional[BinaryIO] = None, scope: Scope = None
    ) -> Any:
        """Создать экземпляр учётных данных; по умолчанию вызывает конструктор класса."""
        return cls(json_key_io=json_key_io, scope=scope)

    @classmethod
    def from_env(cls, scope: Scope = None) -> Optional[Any]:
        """Создать учётные данные из переменных окружения.

        Если задан GOOGLE_APPLICATION_CREDENTIALS, файл обязан существовать:
        ошибка не приводит к переходу на следующий источник.
        """
        try:
            if ENV_VAR in os.environ:
                raw_path = os.environ[ENV_VAR]
                path = Path(raw_path)
                logger.debug("Проверяем файл из %s: %r", ENV_VAR, raw_path)
                # Path("") превращается в ".", поэтому пустое значение проверяется отдельно.
                if not raw_path or not path.is_file():
                    raise FileNotFoundError(f"файл {raw_path!r} не существует")
                with path.open("rb") as stream:
                    creds = cls.make_creds(json_key_io=stream, scope=scope)
                logger.info("Учётные данные загружены из файла %s", path)
                return creds
            if service_account_env_vars() or authorized_user_env_vars():
                logger.debug("Используем учётные данные из переменных окружения")
                creds = cls.make_creds(scope=scope)
                logger.info("Учётные данные загружены из переменных окружения")
                return creds
        except Exception as error:  # noqa: BLE001
            source = (
                CredentialSource.EXPLICIT_PATH
                if ENV_VAR in os.environ
                else CredentialSource.ENVIRONMENT
            )
            raise _wrap(NOT_FOUND_ERROR, source, error) from error
        return None

    @classmethod
    def from_well_known_path(cls, scope: Scope = None) -> Optional[Any]:
        """Создать учётные данные из файла gcloud по стандартному пути."""
        try:
            path = well_known_path()
            logger.debug("Проверяем стандартный путь %s", path)
            if not path.exists():
                return None
            with path.open("rb") as stream:
                creds = cls.make_creds(json_key_io=stream, scope=scope)
            logger.info("Учётные данные загружены из %s", path)
            return creds
        except Exception as error:  # noqa: BLE001
            raise _wrap(WELL_KNOWN_ERROR, CredentialSource.WELL_KNOWN_PATH, error) from error
