"""
Glue between the stores and the engine.

Load history -> execute(command, history) -> append the new events.
Nothing is appended when the engine answers with an error.
"""

import logging
from typing import Iterable, Optional, Tuple
from uuid import uuid4

from . import projection
from .domain import (
    Code,
    GameAlreadyLost,
    GameAlreadyWon,
    GameError,
    GameNotStarted,
    GuessTooLong,
    GuessTooShort,
    InvalidPegGuess,
    JoinGame,
    MakeGuess,
    set_of_pegs,
)
from .game import Result, execute, is_error
from .projection import GameView
from .store import EventStore
from .types import GameId, PegName

logger = logging.getLogger(__name__)


def describe_error(error: GameError) -> str:
    """Human readable message for an engine error."""
    if isinstance(error, GameNotStarted):
        return "Game not started."
    if isinstance(error, GameAlreadyWon):
        return "Game already won. No more guesses allowed."
    if isinstance(error, GameAlreadyLost):
        return "Game already lost. No more guesses allowed."
    if isinstance(error, GuessTooShort):
        return f"Guess has {error.guess.length} peg(s); this game needs exactly {error.required_length}."
    if isinstance(error, GuessTooLong):
        return f"Guess has {error.guess.length} peg(s), too many; this game needs exactly {error.required_length}."
    if isinstance(error, InvalidPegGuess):
        allowed = ", ".join(sorted(peg.name for peg in error.available_pegs))
        return f"Guess uses pegs outside this game's set ({allowed})."
    return "Guess rejected."


class GameService:
    def __init__(self, store: EventStore) -> None:
        self.store = store

    def start(
        self,
        secret: Code,
        total_attempts: int,
        available_pegs: Iterable[PegName],
    ) -> Tuple[GameId, Result]:
        game_id = str(uuid4())
        command = JoinGame(game_id, secret, total_attempts, set_of_pegs(*available_pegs))
        events = execute(command)
        self.store.append(game_id, events, expected_length=0)
        logger.info("started game %s (%d pegs, %d attempts)", game_id, secret.length, total_attempts)
        return game_id, events

    def guess(self, game_id: GameId, pegs: Iterable[PegName]) -> Result:
        history = self.store.load(game_id)
        result = execute(MakeGuess(game_id, Code.of(*pegs)), history)
        if is_error(result):
            logger.info("guess rejected for game %s: %s", game_id, type(result).__name__)
            return result

        self.store.append(game_id, result, expected_length=len(history))
        return result

    def view(self, game_id: GameId) -> Optional[GameView]:
        history = self.store.load(game_id)
        if not history:
            return None
        return projection.project(history)

    def revealed_secret(self, game_id: GameId) -> Optional[Code]:
        """The secret, but only once the game is over."""
        history = self.store.load(game_id)
        if projection.is_won(history) or projection.is_lost(history):
            return projection.secret(history)
        return None
