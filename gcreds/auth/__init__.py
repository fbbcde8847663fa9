"""Поиск и построение учётных данных Google OAuth2."""

from .base import TOKEN_CRED_URI
from .default import DefaultCredentials, get_application_default
from .errors import CredentialSource, CredentialsError, ErrorKind
from .host import is_windows
from .json_key import read_json_key
from .loader import (
    ENV_VAR,
    NOT_FOUND_ERROR,
    WELL_KNOWN_ERROR,
    WELL_KNOWN_PATH,
    CredentialsLoader,
    well_known_path,
)
from .service_account import ServiceAccountCredentials
from .user_refresh import UserRefreshCredentials

__all__ = [
    "TOKEN_CRED_URI",
    "DefaultCredentials",
    "get_application_default",
    "CredentialSource",
    "CredentialsError",
    "ErrorKind",
    "is_windows",
    "read_json_key",
    "ENV_VAR",
    "NOT_FOUND_ERROR",
    "WELL_KNOWN_ERROR",
    "WELL_KNOWN_PATH",
    "CredentialsLoader",
    "well_known_path",
    "ServiceAccountCredentials",
    "UserRefreshCredentials",
]
