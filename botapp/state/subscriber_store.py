"""Persistence for chats that asked to be told when the court status changes."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, Optional, Set

from tracking import t


class SubscriberStore:
    """Read/write subscribed chat ids to a JSON backing file."""

    def __init__(self, file_path: str, *, logger: Optional[logging.Logger] = None) -> None:
        t('botapp.state.subscriber_store.SubscriberStore.__init__')
        self._path = Path(file_path)
        self._logger = logger or logging.getLogger('SubscriberStore')
        self._chat_ids: Set[int] = set(self._load())

    def _load(self) -> List[int]:
        """Load chat ids from disk, returning an empty list on failure."""
        t('botapp.state.subscriber_store.SubscriberStore._load')
        if not self._path.exists():
            self._logger.debug("Subscribers file %s does not exist; starting empty", self._path)
            return []

        try:
            with self._path.open('r', encoding='utf-8') as handle:
                payload = json.load(handle)
        except (OSError, ValueError) as exc:
            self._logger.error("Failed to load subscribers from %s: %s", self._path, exc)
            return []

        if not isinstance(payload, list):
            self._logger.warning(
                "Invalid subscribers format in %s; expected list, received %s",
                self._path,
                type(payload).__name__,
            )
            return []

        chat_ids = []
        for value in payload:
            try:
                chat_ids.append(int(value))
            except (TypeError, ValueError):
                self._logger.warning("Ignoring invalid chat id %r in %s", value, self._path)
        return chat_ids

    def _save(self) -> None:
        t('botapp.state.subscriber_store.SubscriberStore._save')
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with self._path.open('w', encoding='utf-8') as handle:
                json.dump(sorted(self._chat_ids), handle, indent=2)
        except OSError as exc:
            self._logger.error("Failed to save subscribers to %s: %s", self._path, exc)

    def add(self, chat_id: int) -> bool:
        """Subscribe ``chat_id``; returns False if it was already subscribed."""
        t('botapp.state.subscriber_store.SubscriberStore.add')
        if chat_id in self._chat_ids:
            return False
        self._chat_ids.add(chat_id)
        self._save()
        return True

    def remove(self, chat_id: int) -> bool:
        t('botapp.state.subscriber_store.SubscriberStore.remove')
        if chat_id not in self._chat_ids:
            return False
        self._chat_ids.discard(chat_id)
        self._save()
        return True

    def contains(self, chat_id: int) -> bool:
        return chat_id in self._chat_ids

    def all(self) -> List[int]:
        t('botapp.state.subscriber_store.SubscriberStore.all')
        return sorted(self._chat_ids)


__all__ = ["SubscriberStore"]
