"""
Saved search persistence on top of a key/value storage slot.
"""

from __future__ import annotations

import json
import logging
import uuid
from collections.abc import Callable, Sequence
from datetime import datetime, timezone

from app.domain.search import SavedSearch
from app.logging_utils import log_event
from app.storage.key_value import KeyValueStorage

logger = logging.getLogger(__name__)

SAVED_SEARCHES_KEY = "competitoriq_saved_searches"
MAX_SAVED_SEARCHES = 50


def _new_id() -> str:
    return str(uuid.uuid4())


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class SavedSearchStore:
    """
    Most-recent-first list of saved searches, capped at 50 entries.

    Every operation reads the slot, modifies the list and writes it back.
    There is no locking, so concurrent writers race and the last write wins.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        *,
        id_factory: Callable[[], str] = _new_id,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._storage = storage
        self._id_factory = id_factory
        self._clock = clock

    def list(self) -> list[SavedSearch]:
        """
        Return saved searches, or an empty list if the slot is missing or unreadable.
        """

        try:
            raw = self._storage.get(SAVED_SEARCHES_KEY)
            if not raw:
                return []
            payload = json.loads(raw)
            if not isinstance(payload, list):
                raise TypeError("saved searches payload is not a list")
            return [SavedSearch.from_dict(item) for item in payload]
        # UnicodeDecodeError is a ValueError.
        except (OSError, ValueError, TypeError, KeyError, AttributeError) as exc:
            log_event(
                logger,
                logging.WARNING,
                "saved_searches_unreadable",
                key=SAVED_SEARCHES_KEY,
                error=str(exc),
            )
            return []

    def save(
        self,
        query: str,
        category: str | None,
        competitor_ids: Sequence[str],
    ) -> SavedSearch:
        """
        Prepend a new saved search, truncate to the cap and persist.
        """

        saved = SavedSearch(
            id=self._id_factory(),
            query=query,
            category=category,
            competitor_ids=list(competitor_ids),
            created_at=self._clock().isoformat(),
        )
        searches = [saved, *self.list()][:MAX_SAVED_SEARCHES]
        self._write(searches)
        log_event(logger, logging.INFO, "saved_search_created", saved_search_id=saved.id)
        return saved

    def delete(self, search_id: str) -> None:
        """
        Remove the entry with this id. Unknown ids are ignored.
        """

        searches = [search for search in self.list() if search.id != search_id]
        self._write(searches)

    def _write(self, searches: Sequence[SavedSearch]) -> None:
        self._storage.set(
            SAVED_SEARCHES_KEY,
            json.dumps([search.to_dict() for search in searches]),
        )
