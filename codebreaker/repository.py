"""
DB-backed event store that mirrors the in-memory EventStore API.

Public methods:
- exists(game_id) -> bool
- load(game_id) -> list[GameEvent]
- append(game_id, events, expected_length) -> None

Why: lets me switch from memory to MySQL without changing the service or routes.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Sequence

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from .domain import GameEvent
from .models import EventRecord
from .serialization import event_from_dict, event_to_dict, event_type
from .store import ConcurrentAppendError
from .types import GameId

logger = logging.getLogger(__name__)


class SQLEventStore:
    """Drop-in replacement for InMemoryEventStore, but using the database."""

    def __init__(self, db: Session):
        self.db = db

    def _length(self, game_id: GameId) -> int:
        return self.db.execute(
            select(func.count()).select_from(EventRecord).where(EventRecord.game_id == game_id)
        ).scalar_one()

    def exists(self, game_id: GameId) -> bool:
        return self._length(game_id) > 0

    def load(self, game_id: GameId) -> List[GameEvent]:
        rows = (
            self.db.execute(
                select(EventRecord).where(EventRecord.game_id == game_id).order_by(EventRecord.sequence.asc())
            )
            .scalars()
            .all()
        )
        return [event_from_dict(row.payload) for row in rows]

    def append(self, game_id: GameId, events: Sequence[GameEvent], expected_length: int) -> None:
        actual = self._length(game_id)
        if actual != expected_length:
            raise ConcurrentAppendError(game_id, expected_length, actual)

        now = datetime.utcnow()
        for offset, event in enumerate(events):
            self.db.add(
                EventRecord(
                    game_id=game_id,
                    sequence=expected_length + offset,
                    type=event_type(event),
                    payload=event_to_dict(event),
                    created_at=now,
                )
            )

        # A writer that slipped in between the count and the commit trips the
        # unique (game_id, sequence) constraint instead.
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            logger.warning("append conflict on game %s at sequence %d", game_id, expected_length)
            raise ConcurrentAppendError(game_id, expected_length, self._length(game_id))
        logger.debug("stored %d event(s) for game %s", len(events), game_id)
