"""
Testing the service over the in-memory store
- Start a game, guess, check that only accepted guesses reach the log.
"""

from codebreaker.domain import (
    Code,
    GameAlreadyWon,
    GameNotStarted,
    GameStarted,
    GameWon,
    GuessTooLong,
    GuessTooShort,
    InvalidPegGuess,
    set_of_pegs,
)
from codebreaker.service import GameService, describe_error
from codebreaker.store import InMemoryEventStore

PEGS = ("Red", "Green", "Blue", "Yellow", "Purple", "Pink")


def new_service():
    return GameService(InMemoryEventStore())


def test_service_start_and_guess():
    service = new_service()
    secret = Code.of("Red", "Green", "Blue")

    game_id, events = service.start(secret, 3, PEGS)
    assert events == [GameStarted(game_id, secret, 3, set_of_pegs(*PEGS))]

    view = service.view(game_id)
    assert view.status == "in_progress"
    assert view.attempts_left == 3
    assert service.revealed_secret(game_id) is None

    # Wrong guess, same length -> attempts decrement, history grows
    service.guess(game_id, ["Pink", "Pink", "Pink"])
    view = service.view(game_id)
    assert view.attempts_left == 2
    assert len(view.guesses) == 1

    # Winning guess ends the game
    result = service.guess(game_id, ["Red", "Green", "Blue"])
    assert result[-1] == GameWon(game_id)
    assert service.view(game_id).status == "won"
    assert service.revealed_secret(game_id) == secret


def test_service_rejected_guess_appends_nothing():
    service = new_service()
    game_id, _ = service.start(Code.of("Red", "Green", "Blue"), 3, PEGS)

    result = service.guess(game_id, ["Red"])
    assert isinstance(result, GuessTooShort)
    assert len(service.store.load(game_id)) == 1


def test_service_guess_after_win_is_refused():
    service = new_service()
    game_id, _ = service.start(Code.of("Red", "Red"), 5, PEGS)
    service.guess(game_id, ["Red", "Red"])

    assert service.guess(game_id, ["Red", "Red"]) == GameAlreadyWon(game_id)


def test_service_unknown_game():
    service = new_service()
    assert service.view("missing") is None
    assert service.guess("missing", ["Red"]) == GameNotStarted("missing")


def test_service_loses_after_last_attempt():
    service = new_service()
    game_id, _ = service.start(Code.of("Blue", "Blue"), 1, PEGS)
    service.guess(game_id, ["Pink", "Pink"])

    assert service.view(game_id).status == "lost"
    assert service.revealed_secret(game_id) == Code.of("Blue", "Blue")


def test_describe_error_messages():
    guess = Code.of("Red", "Red", "Red", "Red", "Red")
    assert "needs exactly 4" in describe_error(GuessTooLong("g", guess, 4))
    assert "Green, Red" in describe_error(InvalidPegGuess("g", guess, set_of_pegs("Red", "Green")))
    assert "already won" in describe_error(GameAlreadyWon("g"))
