"""Учётные данные сервисного аккаунта Google на основе JSON-ключа."""

from __future__ import annotations

from typing import BinaryIO, Optional

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from google.auth import crypt
from google.oauth2 import service_account

from .base import DelegatingCredentials, scopes_list
from .errors import CredentialsError, ErrorKind
from .json_key import read_env_key, read_json_key
from .loader import Scope


def load_signing_key(private_key: str) -> crypt.Signer:
    """Разобрать PEM-ключ RSA в объект подписи; ключи других типов отклоняются."""
    try:
        key = serialization.load_pem_private_key(
            private_key.encode("utf-8"), password=None
        )
    except (ValueError, TypeError, UnsupportedAlgorithm) as error:
        raise CredentialsError(
            f"Не удалось разобрать private_key: {error}",
            ErrorKind.PARSE_FAILURE,
            field="private_key",
            cause=error,
        ) from error
    if not isinstance(key, rsa.RSAPrivateKey):
        raise CredentialsError(
            f"private_key должен быть ключом RSA, получен {type(key).__name__}",
            ErrorKind.PARSE_FAILURE,
            field="private_key",
        )
    return crypt.RSASigner(key)


class ServiceAccountCredentials(DelegatingCredentials):
    """Учётные данные сервисного аккаунта.

    Ключ читается из JSON-файла, скачанного из консоли разработчика
    ('Generate new JSON key'), либо из переменных GOOGLE_PRIVATE_KEY и
    GOOGLE_CLIENT_EMAIL, если поток не передан.
    """

    def __init__(self, scope: Scope = None, json_key_io: Optional[BinaryIO] = None) -> None:
        if json_key_io is None:
            private_key, client_email = read_env_key()
        else:
            private_key, client_email = read_json_key(json_key_io)
        self.scope = scope
        self.issuer = client_email
        self.signing_key = load_signing_key(private_key)

    def _build_google_credentials(self) -> service_account.Credentials:
        return service_account.Credentials(
            self.signing_key,
            self.issuer,
            self.token_credential_uri,
            scopes=scopes_list(self.scope),
        )

    def __repr__(self) -> str:
        return f"ServiceAccountCredentials(issuer={self.issuer!r}, scope={self.scope!r})"
