"""Разбор JSON-ключей сервисных аккаунтов."""

from __future__ import annotations

import json
import os
from typing import Any, BinaryIO, Dict, Tuple

from .errors import CredentialsError, ErrorKind

PRIVATE_KEY_VAR = "GOOGLE_PRIVATE_KEY"
CLIENT_EMAIL_VAR = "GOOGLE_CLIENT_EMAIL"


def load_json_key_info(json_key_io: BinaryIO) -> Dict[str, Any]:
    """Прочитать поток целиком и вернуть JSON-объект ключа."""
    raw = json_key_io.read()
    try:
        info = json.loads(raw)
    except ValueError as error:
        raise CredentialsError(
            f"Некорректный JSON в файле ключа: {error}",
            ErrorKind.PARSE_FAILURE,
            cause=error,
        ) from error
    if not isinstance(info, dict):
        raise CredentialsError(
            "JSON-ключ должен быть объектом",
            ErrorKind.PARSE_FAILURE,
        )
    return info


def require_fields(info: Dict[str, Any], *names: str) -> Tuple[str, ...]:
    """Вернуть значения обязательных строковых полей в порядке `names`."""
    values = []
    for name in names:
        if name not in info:
            raise CredentialsError(
                f"В ключе отсутствует поле {name}", ErrorKind.MISSING_FIELD, field=name
            )
        value = info[name]
        if not isinstance(value, str):
            raise CredentialsError(
                f"Поле {name} должно быть строкой", ErrorKind.PARSE_FAILURE, field=name
            )
        values.append(value)
    return tuple(values)


def read_json_key(json_key_io: BinaryIO) -> Tuple[str, str]:
    """Вернуть пару (private_key, client_email) из JSON-ключа.

    Лишние поля игнорируются; отсутствие любого из двух обязательных полей
    считается фатальной ошибкой.
    """
    info = load_json_key_info(json_key_io)
    client_email, private_key = require_fields(info, "client_email", "private_key")
    return private_key, client_email


def unescape(value: str) -> str:
    """Привести значение из переменной окружения к исходному виду.

    Снимает одну пару обрамляющих двойных кавычек и заменяет литералы `\\n`
    на переводы строки.
    """
    if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
        value = value[1:-1]
    return value.replace("\\n", "\n")


def read_env_key() -> Tuple[str, str]:
    """Вернуть пару (private_key, client_email) из переменных окружения."""
    for name in (PRIVATE_KEY_VAR, CLIENT_EMAIL_VAR):
        if name not in os.environ:
            raise CredentialsError(
                f"В окружении отсутствует переменная {name}",
                ErrorKind.MISSING_FIELD,
                field=name,
            )
    return unescape(os.environ[PRIVATE_KEY_VAR]), os.environ[CLIENT_EMAIL_VAR]
