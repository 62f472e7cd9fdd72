"""
Read-only views over a game's event history.

There is no "current state" object to keep in sync: every answer is
recomputed by scanning the log. Histories are bounded by the attempt budget,
so a linear scan per query is fine.
"""

from dataclasses import dataclass
from typing import FrozenSet, Optional, Tuple

from .domain import (
    Code,
    Game,
    GameLost,
    GameStarted,
    GameWon,
    Guess,
    GuessMade,
    Peg,
)
from .types import GameId, GameStatus


def _game_started(game: Game) -> Optional[GameStarted]:
    # If a log somehow holds more than one GameStarted, the first one counts.
    for event in game:
        if isinstance(event, GameStarted):
            return event
    return None


def is_started(game: Game) -> bool:
    return _game_started(game) is not None


def is_won(game: Game) -> bool:
    return any(isinstance(event, GameWon) for event in game)


def is_lost(game: Game) -> bool:
    return any(isinstance(event, GameLost) for event in game)


def secret(game: Game) -> Optional[Code]:
    started = _game_started(game)
    return started.secret if started else None


def secret_length(game: Game) -> int:
    code = secret(game)
    return code.length if code is not None else 0


def secret_pegs(game: Game) -> Tuple[Peg, ...]:
    code = secret(game)
    return code.pegs if code is not None else ()


def total_attempts(game: Game) -> int:
    started = _game_started(game)
    return started.total_attempts if started else 0


def available_pegs(game: Game) -> FrozenSet[Peg]:
    started = _game_started(game)
    return started.available_pegs if started else frozenset()


def attempts(game: Game) -> int:
    """How many guesses are already in the log."""
    return sum(1 for event in game if isinstance(event, GuessMade))


def guesses(game: Game) -> list[Guess]:
    return [event.guess for event in game if isinstance(event, GuessMade)]


def is_guess_too_short(game: Game, guess: Code) -> bool:
    return guess.length < secret_length(game)


def is_guess_too_long(game: Game, guess: Code) -> bool:
    return guess.length > secret_length(game)


def is_guess_valid(game: Game, guess: Code) -> bool:
    return available_pegs(game).issuperset(guess.pegs)


def status(game: Game) -> GameStatus:
    if not is_started(game):
        return "not_started"
    if is_won(game):
        return "won"
    if is_lost(game):
        return "lost"
    return "in_progress"


@dataclass(frozen=True)
class GameView:
    """Everything the host wants to show about a game, in one snapshot."""

    game_id: Optional[GameId]
    status: GameStatus
    secret_length: int
    total_attempts: int
    attempts: int
    attempts_left: int
    available_pegs: FrozenSet[Peg]
    guesses: Tuple[Guess, ...]


def project(game: Game) -> GameView:
    used = attempts(game)
    budget = total_attempts(game)
    return GameView(
        game_id=game[0].game_id if game else None,
        status=status(game),
        secret_length=secret_length(game),
        total_attempts=budget,
        attempts=used,
        attempts_left=max(budget - used, 0),
        available_pegs=available_pegs(game),
        guesses=tuple(guesses(game)),
    )
