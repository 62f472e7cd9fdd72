"""
Guard checks for MakeGuess.

Order matters and is fixed; the first failing check decides the error:
  1. game not started
  2. game already won
  3. game already lost
  4. guess too short
  5. guess too long
  6. guess uses a peg the game was not started with

Each check returns the error value, or None when the command passes.
"""

from typing import Optional

from . import projection
from .domain import (
    Game,
    GameAlreadyLost,
    GameAlreadyWon,
    GameError,
    GameNotStarted,
    GuessError,
    GuessTooLong,
    GuessTooShort,
    InvalidPegGuess,
    MakeGuess,
)


def started_not_finished_game(command: MakeGuess, game: Game) -> Optional[GameError]:
    if not projection.is_started(game):
        return GameNotStarted(command.game_id)
    if projection.is_won(game):
        return GameAlreadyWon(command.game_id)
    if projection.is_lost(game):
        return GameAlreadyLost(command.game_id)
    return None


def valid_guess(command: MakeGuess, game: Game) -> Optional[GuessError]:
    guess = command.guess
    if projection.is_guess_too_short(game, guess):
        return GuessTooShort(command.game_id, guess, projection.secret_length(game))
    if projection.is_guess_too_long(game, guess):
        return GuessTooLong(command.game_id, guess, projection.secret_length(game))
    if not projection.is_guess_valid(game, guess):
        return InvalidPegGuess(command.game_id, guess, projection.available_pegs(game))
    return None


def validate_guess(command: MakeGuess, game: Game) -> Optional[GameError]:
    error = started_not_finished_game(command, game)
    if error is not None:
        return error
    return valid_guess(command, game)
