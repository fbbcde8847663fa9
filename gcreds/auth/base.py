"""Общая часть объектов учётных данных, выдаваемых поиском."""

from __future__ import annotations

from typing import List, Optional

from google.auth import transport

from .loader import CredentialsLoader, Scope

TOKEN_CRED_URI = "https://www.googleapis.com/oauth2/v3/token"


def scopes_list(scope: Scope) -> Optional[List[str]]:
    """Привести scope к списку, который ожидает google-auth."""
    if scope is None:
        return None
    if isinstance(scope, str):
        return [scope]
    return list(scope)


class DelegatingCredentials(CredentialsLoader):
    """Хранит аргументы построения и делегирует работу с токеном google-auth."""

    token_credential_uri = TOKEN_CRED_URI
    audience = TOKEN_CRED_URI

    _google_credentials = None

    def _build_google_credentials(self):  # pragma: no cover - переопределяется
        raise NotImplementedError

    def to_google_credentials(self):
        """Вернуть (и закэшировать) объект учётных данных google-auth."""
        if self._google_credentials is None:
            self._google_credentials = self._build_google_credentials()
        return self._google_credentials

    def refresh(self, request: transport.Request) -> None:
        self.to_google_credentials().refresh(request)

    @property
    def token(self) -> Optional[str]:
        return self.to_google_credentials().token

    @property
    def valid(self) -> bool:
        return self.to_google_credentials().valid
