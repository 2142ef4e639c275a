from __future__ import annotations

import pytest

from layerconf.utils import MISSING_PATH, get_path, insert_path, split_key


def test_split_key_drops_empty_segments() -> None:
    assert split_key("server..port.") == ["server", "port"]
    assert split_key("") == []


def test_get_path_walks_nested_mappings() -> None:
    data = {"server": {"port": 80, "tls": None}}

    assert get_path(data, ["server", "port"]) == 80
    assert get_path(data, ["server", "tls"]) is None
    assert get_path(data, ["server", "host"]) is MISSING_PATH
    assert get_path(data, ["server", "port", "x"]) is MISSING_PATH


def test_insert_path_creates_and_replaces_intermediates() -> None:
    data: dict[str, object] = {"server": "flat"}

    insert_path(data, ["server", "port"], 80)
    insert_path(data, ["debug"], True)

    assert data == {"server": {"port": 80}, "debug": True}


def test_insert_path_requires_a_segment() -> None:
    with pytest.raises(ValueError):
        insert_path({}, [], 1)
