"""Key-value storage backends for persisted chat sessions."""

from collections.abc import MutableMapping
from typing import Any, Protocol


class KeyValueStore(Protocol):
    """Minimal durable store the session store depends on."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class MappingStorage:
    """Store backed by any mutable mapping.

    Used with NiceGUI's ``app.storage.user`` so that sessions live in
    per-browser storage.
    """

    def __init__(self, mapping: MutableMapping[str, Any]) -> None:
        self._mapping = mapping

    def get(self, key: str) -> str | None:
        value = self._mapping.get(key)
        # Anything that is not a string was not written by us
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        self._mapping[key] = value


class MemoryStorage(MappingStorage):
    """In-process store, lost when the process exits."""

    def __init__(self) -> None:
        super().__init__({})
