"""
Testing read-only views over the event log.
"""

from codebreaker import projection
from codebreaker.domain import (
    Code,
    Feedback,
    GameLost,
    GameWon,
    Guess,
    GuessMade,
    Outcome,
    not_started_game,
)

WRONG = Code.of("Pink", "Pink", "Pink", "Pink")


def test_not_started_game_defaults():
    game = not_started_game()
    assert projection.is_started(game) is False
    assert projection.is_won(game) is False
    assert projection.is_lost(game) is False
    assert projection.secret(game) is None
    assert projection.secret_length(game) == 0
    assert projection.secret_pegs(game) == ()
    assert projection.total_attempts(game) == 0
    assert projection.available_pegs(game) == frozenset()
    assert projection.attempts(game) == 0
    assert projection.status(game) == "not_started"


def test_started_game(started_game, secret, available_pegs):
    assert projection.is_started(started_game)
    assert projection.secret(started_game) == secret
    assert projection.secret_length(started_game) == 4
    assert projection.secret_pegs(started_game) == secret.pegs
    assert projection.total_attempts(started_game) == 12
    assert projection.available_pegs(started_game) == available_pegs
    assert projection.status(started_game) == "in_progress"


def test_attempts_count_guesses(game_id, started_game):
    made = GuessMade(game_id, Guess(WRONG, Feedback.of(Outcome.IN_PROGRESS)))
    game = started_game + [made, made]
    assert projection.attempts(game) == 2
    assert projection.guesses(game) == [made.guess, made.guess]


def test_terminal_states(game_id, started_game):
    assert projection.status(started_game + [GameWon(game_id)]) == "won"
    assert projection.status(started_game + [GameLost(game_id)]) == "lost"


def test_guess_predicates(started_game):
    assert projection.is_guess_too_short(started_game, Code.of("Red"))
    assert projection.is_guess_too_long(started_game, Code.of(*["Red"] * 5))
    assert projection.is_guess_valid(started_game, Code.of("Red", "Pink", "Pink", "Blue"))
    assert not projection.is_guess_valid(started_game, Code.of("Red", "Black", "Pink", "Blue"))


def test_project_builds_a_view(game_id, started_game):
    made = GuessMade(game_id, Guess(WRONG, Feedback.of(Outcome.IN_PROGRESS)))
    view = projection.project(started_game + [made])
    assert view.game_id == game_id
    assert view.status == "in_progress"
    assert view.attempts == 1
    assert view.attempts_left == 11
    assert view.guesses == (made.guess,)


def test_projection_does_not_change_the_log(started_game):
    before = list(started_game)
    projection.project(started_game)
    assert started_game == before
