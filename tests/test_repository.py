# tests/test_repository.py
import pytest

from codebreaker.domain import Code, GameWon, MakeGuess
from codebreaker.game import execute
from codebreaker.repository import SQLEventStore
from codebreaker.store import ConcurrentAppendError


def test_repository_flow(db_session, game_id, secret, started_game):
    repo = SQLEventStore(db_session)
    assert repo.exists(game_id) is False

    repo.append(game_id, started_game, expected_length=0)
    assert repo.load(game_id) == started_game

    # Guess (not win)
    history = repo.load(game_id)
    events = execute(MakeGuess(game_id, Code.of("Red", "Pink", "Pink", "Pink")), history)
    repo.append(game_id, events, expected_length=len(history))

    # Win
    history = repo.load(game_id)
    events = execute(MakeGuess(game_id, secret), history)
    repo.append(game_id, events, expected_length=len(history))

    stored = repo.load(game_id)
    assert len(stored) == 4
    assert stored[-2:] == events
    assert isinstance(stored[-1], GameWon)


def test_repository_refuses_stale_append(db_session, game_id, secret, started_game):
    repo = SQLEventStore(db_session)
    repo.append(game_id, started_game, expected_length=0)

    events = execute(MakeGuess(game_id, secret), started_game)
    with pytest.raises(ConcurrentAppendError):
        repo.append(game_id, events, expected_length=0)
    assert repo.load(game_id) == started_game


def test_repository_keeps_games_apart(db_session, started_game, game_id):
    repo = SQLEventStore(db_session)
    repo.append(game_id, started_game, expected_length=0)
    assert repo.load("some-other-game") == []
