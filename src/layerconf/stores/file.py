"""YAML file store implementation."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from result import Err, Ok, Result, is_err

from layerconf.common import create_logger
from layerconf.utils import MISSING_PATH, get_path, insert_path, split_key

from .models import StoreError, StoreKeyNotFoundError, StoreReadError, StoreWriteError, StoreWriteUnsupportedError

logger = create_logger("store.file")


class YamlFileStore:
    """Store backed by a YAML mapping; dotted keys address nested sections."""

    def __init__(self, path: Path, *, name: str | None = None, writable: bool = True) -> None:
        self._path = Path(path).expanduser()
        self._name = name or f"file:{self._path}"
        self._writable = writable

    @property
    def name(self) -> str:
        return self._name

    @property
    def writable(self) -> bool:
        return self._writable

    @property
    def path(self) -> Path:
        return self._path

    def read(self, key: str) -> Result[object, StoreError]:
        if not self._path.is_file():
            return Err(self._not_found(key))

        load_result = self._load_mapping(key)
        if is_err(load_result):
            return load_result

        value = get_path(load_result.unwrap(), split_key(key))
        if value is MISSING_PATH:
            return Err(self._not_found(key))
        return Ok(value)

    def write(self, key: str, raw: object) -> Result[None, StoreError]:
        if not self._writable:
            return Err(
                StoreWriteUnsupportedError(
                    store=self._name,
                    key=key,
                    message=f"Store '{self._name}' is read-only",
                )
            )

        path = split_key(key)
        if not path:
            return Err(StoreWriteError(store=self._name, key=key, message="Key must not be empty"))

        data: dict[str, Any] = {}
        if self._path.is_file():
            load_result = self._load_mapping(key)
            if is_err(load_result):
                error = load_result.unwrap_err()
                return Err(StoreWriteError(store=self._name, key=key, message=error.message))
            data = load_result.unwrap()

        insert_path(data, path, raw)

        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(yaml.safe_dump(data, sort_keys=False), encoding="utf-8")
        except (OSError, yaml.YAMLError) as exc:
            logger.error("Config file write error", path=str(self._path), error=str(exc))
            return Err(StoreWriteError(store=self._name, key=key, message=f"Failed to write file: {exc}"))

        logger.debug("Config file updated", path=str(self._path), key=key)
        return Ok(None)

    def _load_mapping(self, key: str) -> Result[dict[str, Any], StoreError]:
        try:
            raw_text = self._path.read_text(encoding="utf-8")
        except OSError as exc:
            logger.error("Config file read error", path=str(self._path), error=str(exc))
            return Err(StoreReadError(store=self._name, key=key, message=str(exc)))

        try:
            data = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            mark = getattr(exc, "problem_mark", None)
            line = getattr(mark, "line", None)
            column = getattr(mark, "column", None)
            logger.error(
                "Config YAML parse error",
                path=str(self._path),
                line=line,
                column=column,
                error=str(exc),
            )
            location = f" at line {line + 1}, column {column + 1}" if line is not None and column is not None else ""
            return Err(StoreReadError(store=self._name, key=key, message=f"Invalid YAML{location}: {exc}"))

        if data is None:
            data = {}

        if not isinstance(data, dict):
            logger.error("Config must be a mapping", path=str(self._path))
            return Err(
                StoreReadError(
                    store=self._name,
                    key=key,
                    message="Configuration root must be a mapping of keys to values.",
                )
            )

        return Ok(data)

    def _not_found(self, key: str) -> StoreKeyNotFoundError:
        return StoreKeyNotFoundError(
            store=self._name,
            key=key,
            message=f"Key '{key}' not found in '{self._path}'",
        )
