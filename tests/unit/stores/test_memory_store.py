from __future__ import annotations

from result import is_err, is_ok

from layerconf.stores import InMemoryStore, StoreAdapter, StoreKeyNotFoundError, StoreWriteUnsupportedError


def test_memory_store_implements_protocol() -> None:
    assert isinstance(InMemoryStore(), StoreAdapter)


def test_read_returns_stored_value() -> None:
    store = InMemoryStore({"region": "eu-west-1"})

    result = store.read("region")

    assert is_ok(result)
    assert result.unwrap() == "eu-west-1"


def test_read_missing_key_returns_not_found() -> None:
    result = InMemoryStore(name="defaults").read("region")

    assert is_err(result)
    error = result.unwrap_err()
    assert isinstance(error, StoreKeyNotFoundError)
    assert error.store == "defaults"
    assert error.key == "region"


def test_write_then_read() -> None:
    store = InMemoryStore()

    assert is_ok(store.write("region", "us-east-1"))
    assert store.read("region").unwrap() == "us-east-1"
    assert store.values == {"region": "us-east-1"}


def test_read_only_store_rejects_writes() -> None:
    store = InMemoryStore({"region": "eu-west-1"}, writable=False)

    result = store.write("region", "us-east-1")

    assert is_err(result)
    assert isinstance(result.unwrap_err(), StoreWriteUnsupportedError)
    assert store.read("region").unwrap() == "eu-west-1"


def test_delete_removes_key() -> None:
    store = InMemoryStore({"region": "eu-west-1"})

    store.delete("region")
    store.delete("region")

    assert is_err(store.read("region"))
