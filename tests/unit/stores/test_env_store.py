from __future__ import annotations

import pytest
from result import is_err, is_ok

from layerconf.stores import EnvironmentStore, StoreKeyNotFoundError, StoreWriteUnsupportedError


@pytest.mark.parametrize(
    ("prefix", "key", "variable"),
    [
        ("", "port", "PORT"),
        ("APP_", "db.host", "APP_DB__HOST"),
        ("APP_", "db.pool-size", "APP_DB__POOL_SIZE"),
    ],
)
def test_variable_name_mapping(prefix: str, key: str, variable: str) -> None:
    assert EnvironmentStore(prefix).variable_name(key) == variable


def test_read_from_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("APP_DB__HOST", "db.internal")

    result = EnvironmentStore("APP_").read("db.host")

    assert is_ok(result)
    assert result.unwrap() == "db.internal"


def test_read_from_explicit_mapping() -> None:
    store = EnvironmentStore("APP_", environ={"APP_PORT": "8080"})

    assert store.read("port").unwrap() == "8080"


def test_missing_variable_is_not_found() -> None:
    result = EnvironmentStore("APP_", environ={}).read("port")

    assert is_err(result)
    error = result.unwrap_err()
    assert isinstance(error, StoreKeyNotFoundError)
    assert "APP_PORT" in error.message


def test_environment_store_is_read_only() -> None:
    store = EnvironmentStore(environ={})

    result = store.write("port", "1")

    assert store.writable is False
    assert is_err(result)
    assert isinstance(result.unwrap_err(), StoreWriteUnsupportedError)
