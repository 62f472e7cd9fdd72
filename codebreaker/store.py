"""
Event log stores.

EventStore is what the service needs from storage: read a game's history and
append new events to it. InMemoryEventStore keeps everything in a dict and is
what the unit tests use; SQLEventStore (repository.py) is the MySQL/SQLite one.

Appends carry the history length the caller saw. If another writer got there
first the append is refused with ConcurrentAppendError, so two guesses against
the same game can never both be scored against the same history.
"""

import logging
from threading import RLock
from typing import Dict, List, Protocol, Sequence

from .domain import GameEvent
from .types import GameId

logger = logging.getLogger(__name__)


class ConcurrentAppendError(Exception):
    def __init__(self, game_id: GameId, expected_length: int, actual_length: int) -> None:
        super().__init__(
            f"Game {game_id} has {actual_length} events, expected {expected_length}. "
            "Reload the history and retry."
        )
        self.game_id = game_id
        self.expected_length = expected_length
        self.actual_length = actual_length


class EventStore(Protocol):
    def exists(self, game_id: GameId) -> bool:
        ...

    def load(self, game_id: GameId) -> List[GameEvent]:
        """Full history for the game, oldest first. Empty if unknown."""
        ...

    def append(self, game_id: GameId, events: Sequence[GameEvent], expected_length: int) -> None:
        """Append all events or none of them."""
        ...


class InMemoryEventStore:
    def __init__(self) -> None:
        self._logs: Dict[GameId, List[GameEvent]] = {}
        self._lock = RLock()

    def exists(self, game_id: GameId) -> bool:
        with self._lock:
            return game_id in self._logs

    def load(self, game_id: GameId) -> List[GameEvent]:
        with self._lock:
            # copy so callers can't mutate the log
            return list(self._logs.get(game_id, []))

    def append(self, game_id: GameId, events: Sequence[GameEvent], expected_length: int) -> None:
        with self._lock:
            log = self._logs.get(game_id, [])
            if len(log) != expected_length:
                logger.warning("append conflict on game %s: expected %d, found %d", game_id, expected_length, len(log))
                raise ConcurrentAppendError(game_id, expected_length, len(log))
            self._logs[game_id] = log + list(events)
            logger.debug("appended %d event(s) to game %s", len(events), game_id)
