# -*- coding: utf-8 -*-
"""
Entry log store.

Holds the ordered log of entries (newest first). The log is read once from
local storage at startup and the whole sequence is written back after every
append. There is a single writer; no locking is done.
"""

import json
from collections import Counter
from typing import Dict, Iterator, List, Optional, Tuple

from athena.app.config import Config
from athena.models.log_entry import EntryType, LogEntry, entry_from_dict, entry_to_dict
from athena.services.exceptions import DuplicateEntryError, InvalidEntryError
from athena.utils.logger import get_logger

from .local_storage import LocalStorage

logger = get_logger(__name__)


class EntryLogStore:
    """Append-only, newest-first log of visitor and vehicle entries."""

    def __init__(self, storage: LocalStorage, key: Optional[str] = None):
        """
        Args:
            storage: Key/value storage backend
            key: Storage key holding the JSON array (default: Config.STORAGE_KEY)
        """
        self.storage = storage
        self.key = key or Config.STORAGE_KEY
        self._entries: List[LogEntry] = []

    # ==================== Loading ====================

    def load(self) -> Tuple[LogEntry, ...]:
        """
        Read the full log from storage.

        Absent or malformed data yields an empty log. Individual records that
        cannot be decoded are skipped.
        """
        self._entries = []

        raw = self.storage.get_item(self.key)
        if raw is None:
            logger.info(f"No stored log under '{self.key}', starting empty")
            return self.entries

        try:
            payload = json.loads(raw)
        except (json.JSONDecodeError, TypeError) as e:
            logger.warning(f"Stored log under '{self.key}' is not valid JSON, starting empty: {e}")
            return self.entries

        if not isinstance(payload, list):
            logger.warning(
                f"Stored log under '{self.key}' is a {type(payload).__name__}, expected a list; starting empty"
            )
            return self.entries

        seen_ids = set()
        for index, item in enumerate(payload):
            try:
                entry = entry_from_dict(item)
            except InvalidEntryError as e:
                logger.warning(f"Skipping stored record #{index}: {e}")
                continue

            if entry.entry_id in seen_ids:
                logger.warning(f"Skipping stored record #{index}: duplicate id {entry.entry_id}")
                continue

            seen_ids.add(entry.entry_id)
            self._entries.append(entry)

        logger.info(f"Loaded {len(self._entries)} entries from '{self.key}'")
        return self.entries

    # ==================== Mutation ====================

    def append(self, entry: LogEntry) -> None:
        """
        Prepend an entry and persist the whole log.

        Raises:
            DuplicateEntryError: if the identifier is already in the log
            StorageException: if the log cannot be written
        """
        if self.get(entry.entry_id) is not None:
            raise DuplicateEntryError(entry.entry_id)

        updated = [entry] + self._entries
        self._persist(updated)
        self._entries = updated

        logger.info(
            f"Saved {entry.entry_type.value} entry {entry.entry_id} "
            f"({len(self._entries)} in log)"
        )

    def _persist(self, entries: List[LogEntry]) -> None:
        payload = [entry_to_dict(entry) for entry in entries]
        self.storage.set_item(self.key, json.dumps(payload, ensure_ascii=False))

    # ==================== Queries ====================

    @property
    def entries(self) -> Tuple[LogEntry, ...]:
        """Snapshot of the log, newest first."""
        return tuple(self._entries)

    def get(self, entry_id: str) -> Optional[LogEntry]:
        for entry in self._entries:
            if entry.entry_id == entry_id:
                return entry
        return None

    def counts_by_type(self) -> Dict[EntryType, int]:
        counts = Counter(entry.entry_type for entry in self._entries)
        return {entry_type: counts.get(entry_type, 0) for entry_type in EntryType}

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[LogEntry]:
        return iter(tuple(self._entries))
