# tests/core/test_exceptions.py
"""
Testes da taxonomia de exceções e do payload canônico de erro.

Os testes asseguram que:
- cada exceção também é a exceção builtin equivalente
- `to_payload()` produz o tipo estável do catálogo
- o payload é serializável em JSON
"""

import json

import pytest

from fileconfig.core import errors
from fileconfig.core.exceptions import (
    ConfigFileError,
    ConfigFileNotFoundError,
    ConfigIOError,
    ConfigParseError,
    InvalidArgumentError,
    UnsupportedConfigFormatError,
)


@pytest.mark.parametrize(
    "exc, builtin, payload_type",
    [
        (ConfigFileNotFoundError("x", path="a.json"), FileNotFoundError, errors.CONFIG_FILE_NOT_FOUND),
        (ConfigIOError("x", path="a.json", operation="write"), OSError, errors.CONFIG_IO_ERROR),
        (ConfigParseError("x", path="a.json", format="json"), ValueError, errors.CONFIG_PARSE_ERROR),
        (
            InvalidArgumentError("x", argument="partial", expected="mapping", received="list"),
            TypeError,
            errors.CONFIG_INVALID_ARGUMENT,
        ),
        (
            UnsupportedConfigFormatError("x", extension=".ini", supported=[".json"]),
            ValueError,
            errors.CONFIG_UNSUPPORTED_FORMAT,
        ),
    ],
)
def test_taxonomy_and_payload(exc, builtin, payload_type):
    assert isinstance(exc, ConfigFileError)
    assert isinstance(exc, builtin)

    payload = exc.to_payload()

    assert payload.type == payload_type
    assert json.loads(json.dumps(payload.to_dict()))["type"] == payload_type


def test_cause_is_reported_in_message_and_payload():
    cause = PermissionError(13, "Permission denied")
    exc = ConfigIOError("cannot write", path="/etc/app.json", cause=cause, operation="write")

    assert "PermissionError" in str(exc)
    details = exc.to_payload().details
    assert details["path"] == "/etc/app.json"
    assert details["cause_type"] == "PermissionError"
    assert details["operation"] == "write"


def test_parse_error_with_path_keeps_cause():
    cause = ValueError("bad token")
    exc = ConfigParseError("bad", cause=cause, format="toml").with_path("cfg.toml")

    assert exc.path == "cfg.toml"
    assert exc.cause is cause
    assert exc.format == "toml"
