"""History repository — the stress history serialised under one store key."""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any

import structlog
from pydantic import TypeAdapter, ValidationError

from stressless.errors import StorageError
from stressless.models import StressEntry
from stressless.storage.base import KeyValueStore

logger = structlog.get_logger(__name__)

STORAGE_KEY = "stressData"

_history_adapter = TypeAdapter(list[StressEntry])


def append(history: Sequence[StressEntry], entry: StressEntry) -> list[StressEntry]:
    """Return *history* plus *entry*, unless an entry with its id is already there."""
    if any(e.id == entry.id for e in history):
        return list(history)
    return [*history, entry]


def dumps(history: Sequence[StressEntry]) -> str:
    return json.dumps([e.to_json_dict() for e in history], ensure_ascii=False)


def loads(raw: str) -> list[StressEntry]:
    """Strict parse: every item must be a valid entry."""
    return _history_adapter.validate_json(raw)


def _item_id(item: Any) -> Any:
    return item.get("id") if isinstance(item, dict) else None


class HistoryRepository:
    """Load, extend and persist the history.

    :meth:`load` is for display: a failed read or unparseable value is logged
    and shown as an empty history.  :meth:`add` never writes over a value it
    could not read; it raises :class:`StorageError` instead.  Stored items
    that fail validation (e.g. ``"stressScore": null`` from older clients)
    are hidden from :meth:`load` but kept as-is when :meth:`add` rewrites
    the list.  A failed write is logged and not raised.
    """

    def __init__(self, store: KeyValueStore, key: str = STORAGE_KEY) -> None:
        self._store = store
        self._key = key

    async def _read(self) -> tuple[list[Any], list[StressEntry]]:
        """Return ``(raw_items, valid_entries)``; raises :class:`StorageError`."""
        raw = await self._store.get_item(self._key)
        if raw is None:
            return [], []
        try:
            items = json.loads(raw)
        except ValueError as exc:
            raise StorageError(f"value under {self._key!r} is not JSON: {exc}") from exc
        if not isinstance(items, list):
            raise StorageError(f"value under {self._key!r} is not a list")

        entries: list[StressEntry] = []
        for index, item in enumerate(items):
            try:
                entries.append(StressEntry.model_validate(item))
            except ValidationError as exc:
                logger.warning(
                    "history.invalid_entry",
                    key=self._key,
                    index=index,
                    entry_id=_item_id(item),
                    errors=exc.error_count(),
                )
        return items, entries

    async def load(self) -> list[StressEntry]:
        try:
            _, history = await self._read()
        except StorageError as exc:
            logger.error("history.load_failed", key=self._key, error=str(exc))
            return []
        logger.debug("history.loaded", entries=len(history))
        return history

    async def save(self, history: Sequence[StressEntry]) -> bool:
        """Replace the stored value with *history*."""
        return await self._write([e.to_json_dict() for e in history])

    async def _write(self, items: list[Any]) -> bool:
        try:
            await self._store.set_item(self._key, json.dumps(items, ensure_ascii=False))
        except StorageError as exc:
            logger.error("history.save_failed", key=self._key, entries=len(items), error=str(exc))
            return False
        logger.debug("history.saved", entries=len(items))
        return True

    async def add(self, entry: StressEntry) -> list[StressEntry]:
        """Append *entry* to the stored list if its id is new.

        Returns the valid entries after the append.  Raises
        :class:`StorageError` without writing if the stored value cannot be
        read or parsed.
        """
        try:
            items, history = await self._read()
        except StorageError as exc:
            logger.error("history.add_aborted", key=self._key, entry_id=entry.id, error=str(exc))
            raise

        if any(_item_id(item) == entry.id for item in items):
            logger.info("history.duplicate_entry", entry_id=entry.id)
            return history

        await self._write([*items, entry.to_json_dict()])
        return append(history, entry)
