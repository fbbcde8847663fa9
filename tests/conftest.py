"""Общие фикстуры: чистое окружение и сгенерированный RSA-ключ."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from gcreds.auth import host

DISCOVERY_VARS = (
    "GOOGLE_APPLICATION_CREDENTIALS",
    "GOOGLE_PRIVATE_KEY",
    "GOOGLE_CLIENT_EMAIL",
    "GOOGLE_CLIENT_ID",
    "GOOGLE_CLIENT_SECRET",
    "GOOGLE_REFRESH_TOKEN",
    "GOOGLE_ACCOUNT_TYPE",
    "APPDATA",
    "LOG_LEVEL",
    "GOOGLE_AUTH_SCOPES",
    "GOOGLE_AUTH_VERIFY_TOKEN",
    "GOOGLE_AUTH_RETRY_ATTEMPTS",
    "GOOGLE_AUTH_RETRY_MAX_DELAY",
)

CLIENT_EMAIL = "robot@project.iam.gserviceaccount.com"


@pytest.fixture(autouse=True)
def clean_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Убрать переменные поиска и направить HOME во временный каталог."""
    for name in DISCOVERY_VARS:
        monkeypatch.delenv(name, raising=False)
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    host.reset_cache()
    yield home
    host.reset_cache()


@pytest.fixture(scope="session")
def private_key_pem() -> str:
    key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
    return key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode("utf-8")


@pytest.fixture
def service_account_info(private_key_pem: str) -> dict:
    return {
        "type": "service_account",
        "project_id": "project",
        "private_key_id": "abc123",
        "private_key": private_key_pem,
        "client_email": CLIENT_EMAIL,
        "client_id": "1234567890",
    }


@pytest.fixture
def authorized_user_info() -> dict:
    return {
        "type": "authorized_user",
        "client_id": "client-id.apps.googleusercontent.com",
        "client_secret": "secret",
        "refresh_token": "1//refresh",
    }


@pytest.fixture
def write_json() -> Callable[[Path, Any], Path]:
    """Записать объект в JSON-файл, создав каталоги."""

    def _write(path: Path, payload: Any) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write
