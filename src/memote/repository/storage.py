# SPDX-License-Identifier: MIT

import os
import re
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

_KEY_PATTERN = re.compile(r"^[A-Za-z0-9_.-]+$")


class KeyValueStorage(ABC):
    """Persistent string storage addressed by string keys."""

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]: ...

    @abstractmethod
    def set_item(self, key: str, value: str) -> None: ...

    @abstractmethod
    def remove_item(self, key: str) -> None: ...


class FileKeyValueStorage(KeyValueStorage):
    """
    One file per key inside ``directory``.

    Writes go to a temporary file in the same directory which then replaces
    the target, so a reader sees either the previous or the new value.
    """

    def __init__(self, directory: Path, suffix: str = ".json") -> None:
        self.directory = directory
        self.suffix = suffix

    def get_item(self, key: str) -> Optional[str]:
        path = self.__path_for_key(key)
        if not path.is_file():
            return None
        return path.read_text(encoding="utf-8")

    def set_item(self, key: str, value: str) -> None:
        path = self.__path_for_key(key)
        self.directory.mkdir(parents=True, exist_ok=True)

        fd, temp_name = tempfile.mkstemp(
            dir=self.directory, prefix=f".{key}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as temp_file:
                temp_file.write(value)
            os.replace(temp_name, path)
        except BaseException:
            Path(temp_name).unlink(missing_ok=True)
            raise

    def remove_item(self, key: str) -> None:
        self.__path_for_key(key).unlink(missing_ok=True)

    def __path_for_key(self, key: str) -> Path:
        if not _KEY_PATTERN.match(key):
            raise ValueError(f"Invalid storage key: '{key}'")
        return self.directory / f"{key}{self.suffix}"


class MemoryKeyValueStorage(KeyValueStorage):
    def __init__(self, items: Optional[dict[str, str]] = None) -> None:
        self.items: dict[str, str] = dict(items) if items is not None else {}

    def get_item(self, key: str) -> Optional[str]:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.items[key] = value

    def remove_item(self, key: str) -> None:
        self.items.pop(key, None)
