"""Ошибки поиска и разбора учётных данных Google."""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Категория сбоя, по которой вызывающий код может ветвиться."""

    MISSING_FIELD = "missing-field"
    NOT_FOUND = "not-found"
    PARSE_FAILURE = "parse-failure"
    IO_FAILURE = "io-failure"


class CredentialSource(str, Enum):
    """Источник, на котором остановился поиск."""

    EXPLICIT_PATH = "explicit-path"
    ENVIRONMENT = "environment"
    WELL_KNOWN_PATH = "well-known-path"


class CredentialsError(RuntimeError):
    """Ошибка при поиске или разборе учётных данных."""

    def __init__(
        self,
        message: str,
        kind: ErrorKind,
        *,
        source: Optional[CredentialSource] = None,
        field: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.source = source
        self.field = field
        self.cause = cause


def classify(error: BaseException) -> ErrorKind:
    """Определить категорию для исключения, пришедшего из файлового ввода или парсинга."""
    if isinstance(error, CredentialsError):
        return error.kind
    if isinstance(error, FileNotFoundError):
        return ErrorKind.NOT_FOUND
    if isinstance(error, OSError):
        return ErrorKind.IO_FAILURE
    return ErrorKind.PARSE_FAILURE
