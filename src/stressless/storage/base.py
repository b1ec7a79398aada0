"""Key-value store contract used for persisting the stress history."""

from __future__ import annotations

from abc import ABC, abstractmethod


class KeyValueStore(ABC):
    """String-keyed, string-valued async store.

    Implementations raise :class:`~stressless.errors.StorageError` when the
    backend cannot be read or written.
    """

    @abstractmethod
    async def get_item(self, key: str) -> str | None:
        """Return the value for *key*, or ``None`` if absent."""

    @abstractmethod
    async def set_item(self, key: str, value: str) -> None:
        """Replace the value for *key*."""

    async def close(self) -> None:
        """Release any resources held by the store."""
