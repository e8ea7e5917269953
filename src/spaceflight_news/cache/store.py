"""Key-value stores backing the local article cache."""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any, Protocol

from spaceflight_news.errors import InvalidDataError, LoadFailedError, SaveFailedError

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """Persistent string-keyed store.

    ``set_many`` and ``remove_many`` apply all keys as one update, so a
    reader never observes some keys written without the others.
    """

    def get(self, key: str) -> Any: ...

    def set_many(self, values: Mapping[str, Any]) -> None: ...

    def remove_many(self, keys: Iterable[str]) -> None: ...


class MemoryKeyValueStore:
    """In-process store, for tests and ephemeral sessions."""

    def __init__(self, initial: Mapping[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = dict(initial or {})

    def get(self, key: str) -> Any:
        return self._data.get(key)

    def set_many(self, values: Mapping[str, Any]) -> None:
        self._data.update(values)

    def remove_many(self, keys: Iterable[str]) -> None:
        for key in keys:
            self._data.pop(key, None)

    def __len__(self) -> int:
        return len(self._data)


class JsonFileKeyValueStore:
    """Store persisted as a single JSON object on disk.

    Each update rewrites the file through a temporary sibling and
    ``Path.replace``, so the file always holds either the old or the new
    contents.

    Args:
        path: Location of the JSON file; parent directories are created on
            first write.
    """

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path).expanduser()

    @property
    def path(self) -> Path:
        return self._path

    def get(self, key: str) -> Any:
        return self._read().get(key)

    def set_many(self, values: Mapping[str, Any]) -> None:
        try:
            data = self._read()
        except InvalidDataError:
            logger.warning(f"Overwriting unreadable cache file {self._path}")
            data = {}
        data.update(values)
        self._write(data)

    def remove_many(self, keys: Iterable[str]) -> None:
        try:
            data = self._read()
        except InvalidDataError:
            # Nothing worth keeping in a corrupted file
            logger.warning(f"Resetting corrupted cache file {self._path}")
            data = {}
        for key in keys:
            data.pop(key, None)
        self._write(data)

    def _read(self) -> dict[str, Any]:
        if not self._path.exists():
            return {}
        try:
            raw = self._path.read_text(encoding="utf-8")
        except OSError as e:
            raise LoadFailedError(str(e)) from e
        if not raw.strip():
            return {}
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise InvalidDataError(str(e)) from e
        if not isinstance(data, dict):
            raise InvalidDataError(f"expected a JSON object, got {type(data).__name__}")
        return data

    def _write(self, data: dict[str, Any]) -> None:
        tmp_path = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(json.dumps(data), encoding="utf-8")
            os.replace(tmp_path, self._path)
        except OSError as e:
            raise SaveFailedError(str(e)) from e
