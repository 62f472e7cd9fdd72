"""
Public entry point of the engine.

    execute(command, game) -> list of new events | GameError

The caller owns the log: on success it appends the returned events (all of
them, atomically); on an error it appends nothing. execute() itself never
touches storage and never raises for rule violations.
"""

import logging
from typing import List, Union, assert_never

from . import rules
from .domain import (
    Game,
    GameCommand,
    GameError,
    GameEvent,
    GameLost,
    GameStarted,
    GameWon,
    Guess,
    GuessMade,
    JoinGame,
    MakeGuess,
    Outcome,
    not_started_game,
)
from .engine import feedback_on

logger = logging.getLogger(__name__)

Result = Union[List[GameEvent], GameError]


def execute(command: GameCommand, game: Game = not_started_game()) -> Result:
    match command:
        case JoinGame():
            return join_game(command)
        case MakeGuess():
            return make_guess(command, game)
        case _:
            assert_never(command)


def is_error(result: Result) -> bool:
    return isinstance(result, GameError)


def join_game(command: JoinGame) -> List[GameEvent]:
    return [
        GameStarted(
            command.game_id,
            command.secret,
            command.total_attempts,
            frozenset(command.available_pegs),
        )
    ]


def make_guess(command: MakeGuess, game: Game) -> Result:
    error = rules.validate_guess(command, game)
    if error is not None:
        logger.debug("rejected guess for game %s: %s", command.game_id, type(error).__name__)
        return error

    event = GuessMade(command.game_id, Guess(command.guess, feedback_on(game, command.guess)))
    return with_outcome(event)


def with_outcome(event: GuessMade) -> List[GameEvent]:
    """A winning or losing guess is followed straight away by its terminal event."""
    events: List[GameEvent] = [event]
    outcome = event.guess.feedback.outcome
    if outcome is Outcome.WON:
        events.append(GameWon(event.game_id))
    elif outcome is Outcome.LOST:
        events.append(GameLost(event.game_id))
    return events
