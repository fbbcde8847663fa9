"""Юнит-тесты разбора JSON-ключа."""

from __future__ import annotations

import io
import json

import pytest

from gcreds.auth.errors import CredentialsError, ErrorKind
from gcreds.auth.json_key import read_env_key, read_json_key, unescape


def _stream(payload: object) -> io.BytesIO:
    return io.BytesIO(json.dumps(payload).encode("utf-8"))


def test_read_json_key_returns_pair_and_ignores_extra_fields() -> None:
    """Возвращается пара (private_key, client_email), лишние поля не мешают."""
    payload = {
        "client_email": "a@b.iam.gserviceaccount.com",
        "private_key": "PEM",
        "project_id": "p",
        "type": "service_account",
    }
    assert read_json_key(_stream(payload)) == ("PEM", "a@b.iam.gserviceaccount.com")


@pytest.mark.parametrize("missing", ["client_email", "private_key"])
def test_read_json_key_missing_field(missing: str) -> None:
    """Ошибка указывает, какое именно поле отсутствует."""
    payload = {"client_email": "a@b", "private_key": "PEM"}
    del payload[missing]

    with pytest.raises(CredentialsError) as excinfo:
        read_json_key(_stream(payload))

    assert excinfo.value.kind is ErrorKind.MISSING_FIELD
    assert excinfo.value.field == missing
    assert missing in str(excinfo.value)


@pytest.mark.parametrize("raw", [b"{not json", b"[1, 2]", b"\"text\""])
def test_read_json_key_rejects_malformed_payload(raw: bytes) -> None:
    with pytest.raises(CredentialsError) as excinfo:
        read_json_key(io.BytesIO(raw))
    assert excinfo.value.kind is ErrorKind.PARSE_FAILURE


def test_read_json_key_rejects_non_string_field() -> None:
    with pytest.raises(CredentialsError) as excinfo:
        read_json_key(_stream({"client_email": 42, "private_key": "PEM"}))
    assert excinfo.value.kind is ErrorKind.PARSE_FAILURE
    assert excinfo.value.field == "client_email"


@pytest.mark.parametrize(
    "value, expected",
    [
        ("line1\\nline2", "line1\nline2"),
        ('"quoted\\n"', "quoted\n"),
        ("plain", "plain"),
        ('"', '"'),
    ],
)
def test_unescape(value: str, expected: str) -> None:
    assert unescape(value) == expected


def test_read_env_key(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GOOGLE_PRIVATE_KEY", '"-----BEGIN-----\\nabc\\n"')
    monkeypatch.setenv("GOOGLE_CLIENT_EMAIL", "env@b.iam.gserviceaccount.com")
    assert read_env_key() == ("-----BEGIN-----\nabc\n", "env@b.iam.gserviceaccount.com")


def test_read_env_key_missing_variable(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GOOGLE_PRIVATE_KEY", "PEM")
    with pytest.raises(CredentialsError) as excinfo:
        read_env_key()
    assert excinfo.value.kind is ErrorKind.MISSING_FIELD
    assert excinfo.value.field == "GOOGLE_CLIENT_EMAIL"
    assert "окружении" in str(excinfo.value)
