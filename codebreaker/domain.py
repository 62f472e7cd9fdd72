"""
Domain values, commands, events and errors.

Commands express intent and are never stored. Events are the only persisted
truth: a game is nothing more than the ordered list of its events.
Errors are returned as values by the engine, never raised.

Everything here is frozen so a history handed to the engine cannot change
underneath it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Sequence, Tuple, Union

from .types import GameId, PegName


class PegColor(Enum):
    """Standard code peg vocabulary."""

    RED = "Red"
    GREEN = "Green"
    BLUE = "Blue"
    YELLOW = "Yellow"
    PURPLE = "Purple"
    PINK = "Pink"


@dataclass(frozen=True)
class Peg:
    name: PegName

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Code:
    pegs: Tuple[Peg, ...] = ()

    @classmethod
    def of(cls, *names: PegName) -> "Code":
        """Code.of("Red", "Green") -> Code((Peg("Red"), Peg("Green")))"""
        return cls(tuple(Peg(name) for name in names))

    @property
    def length(self) -> int:
        return len(self.pegs)

    def names(self) -> list[PegName]:
        return [peg.name for peg in self.pegs]


def set_of_pegs(*names: PegName) -> FrozenSet[Peg]:
    return frozenset(Peg(name) for name in names)


class FeedbackPeg(Enum):
    BLACK = "black"  # right peg, right position
    WHITE = "white"  # right peg, wrong position

    def formatted_name(self) -> str:
        return self.name.capitalize()


class Outcome(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


@dataclass(frozen=True)
class Feedback:
    outcome: Outcome
    pegs: Tuple[FeedbackPeg, ...] = ()

    @classmethod
    def of(cls, outcome: Outcome, *pegs: FeedbackPeg) -> "Feedback":
        return cls(outcome, tuple(pegs))

    @property
    def black_count(self) -> int:
        return sum(1 for peg in self.pegs if peg is FeedbackPeg.BLACK)

    @property
    def white_count(self) -> int:
        return sum(1 for peg in self.pegs if peg is FeedbackPeg.WHITE)


@dataclass(frozen=True)
class Guess:
    code: Code
    feedback: Feedback


# --- Commands ---

@dataclass(frozen=True)
class JoinGame:
    game_id: GameId
    secret: Code
    total_attempts: int
    available_pegs: FrozenSet[Peg] = field(default_factory=frozenset)


@dataclass(frozen=True)
class MakeGuess:
    game_id: GameId
    guess: Code


GameCommand = Union[JoinGame, MakeGuess]


# --- Events ---

@dataclass(frozen=True)
class GameStarted:
    game_id: GameId
    secret: Code
    total_attempts: int
    available_pegs: FrozenSet[Peg] = field(default_factory=frozenset)


@dataclass(frozen=True)
class GuessMade:
    game_id: GameId
    guess: Guess


@dataclass(frozen=True)
class GameWon:
    game_id: GameId


@dataclass(frozen=True)
class GameLost:
    game_id: GameId


GameEvent = Union[GameStarted, GuessMade, GameWon, GameLost]

# A game is its history, oldest event first.
Game = Sequence[GameEvent]


def not_started_game() -> Game:
    return ()


# --- Errors ---

@dataclass(frozen=True)
class GameError:
    game_id: GameId


@dataclass(frozen=True)
class GameFinishError(GameError):
    pass


@dataclass(frozen=True)
class GameAlreadyWon(GameFinishError):
    pass


@dataclass(frozen=True)
class GameAlreadyLost(GameFinishError):
    pass


@dataclass(frozen=True)
class GuessError(GameError):
    pass


@dataclass(frozen=True)
class GameNotStarted(GuessError):
    pass


@dataclass(frozen=True)
class GuessTooShort(GuessError):
    guess: Code
    required_length: int


@dataclass(frozen=True)
class GuessTooLong(GuessError):
    guess: Code
    required_length: int


@dataclass(frozen=True)
class InvalidPegGuess(GuessError):
    guess: Code
    available_pegs: FrozenSet[Peg]
