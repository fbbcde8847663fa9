"""Учётные данные пользователя с refresh-токеном (authorized_user)."""

from __future__ import annotations

import os
from typing import BinaryIO, Optional, Tuple

from google.oauth2 import credentials as user_credentials

from .base import DelegatingCredentials, scopes_list
from .errors import CredentialsError, ErrorKind
from .json_key import load_json_key_info, require_fields
from .loader import CLIENT_ID_VAR, CLIENT_SECRET_VAR, REFRESH_TOKEN_VAR, Scope


def _read_env_secrets() -> Tuple[str, str, str]:
    for name in (CLIENT_ID_VAR, CLIENT_SECRET_VAR, REFRESH_TOKEN_VAR):
        if name not in os.environ:
            raise CredentialsError(
                f"В окружении отсутствует переменная {name}",
                ErrorKind.MISSING_FIELD,
                field=name,
            )
    return (
        os.environ[CLIENT_ID_VAR],
        os.environ[CLIENT_SECRET_VAR],
        os.environ[REFRESH_TOKEN_VAR],
    )


class UserRefreshCredentials(DelegatingCredentials):
    """Учётные данные, полученные через `gcloud auth application-default login`."""

    def __init__(self, scope: Scope = None, json_key_io: Optional[BinaryIO] = None) -> None:
        if json_key_io is None:
            client_id, client_secret, refresh_token = _read_env_secrets()
        else:
            info = load_json_key_info(json_key_io)
            client_id, client_secret, refresh_token = require_fields(
                info, "client_id", "client_secret", "refresh_token"
            )
        self.scope = scope
        self.client_id = client_id
        self.client_secret = client_secret
        self.refresh_token = refresh_token

    def _build_google_credentials(self) -> user_credentials.Credentials:
        return user_credentials.Credentials(
            None,
            refresh_token=self.refresh_token,
            token_uri=self.token_credential_uri,
            client_id=self.client_id,
            client_secret=self.client_secret,
            scopes=scopes_list(self.scope),
        )

    def __repr__(self) -> str:
        return f"UserRefreshCredentials(client_id={self.client_id!r}, scope={self.scope!r})"
