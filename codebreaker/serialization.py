"""
Event <-> plain dict, for storing events as JSON.

    {"type": "GuessMade", "game_id": "...", "guess": {...}}

Pegs are stored by name. Peg sets are stored sorted so the same event always
serializes to the same document.
"""

from typing import Any, Dict, Iterable, List

from .domain import (
    Code,
    Feedback,
    FeedbackPeg,
    GameEvent,
    GameLost,
    GameStarted,
    GameWon,
    Guess,
    GuessMade,
    Outcome,
    Peg,
    set_of_pegs,
)


def event_type(event: GameEvent) -> str:
    return type(event).__name__


def _pegs_to_list(pegs: Iterable[Peg]) -> List[str]:
    return sorted(peg.name for peg in pegs)


def _guess_to_dict(guess: Guess) -> Dict[str, Any]:
    return {
        "code": guess.code.names(),
        "outcome": guess.feedback.outcome.value,
        "feedback": [peg.value for peg in guess.feedback.pegs],
    }


def _guess_from_dict(data: Dict[str, Any]) -> Guess:
    feedback = Feedback(
        Outcome(data["outcome"]),
        tuple(FeedbackPeg(value) for value in data["feedback"]),
    )
    return Guess(Code.of(*data["code"]), feedback)


def event_to_dict(event: GameEvent) -> Dict[str, Any]:
    data: Dict[str, Any] = {"type": event_type(event), "game_id": event.game_id}
    if isinstance(event, GameStarted):
        data["secret"] = event.secret.names()
        data["total_attempts"] = event.total_attempts
        data["available_pegs"] = _pegs_to_list(event.available_pegs)
    elif isinstance(event, GuessMade):
        data["guess"] = _guess_to_dict(event.guess)
    return data


def event_from_dict(data: Dict[str, Any]) -> GameEvent:
    kind = data.get("type")
    game_id = data["game_id"]
    if kind == "GameStarted":
        return GameStarted(
            game_id,
            Code.of(*data["secret"]),
            int(data["total_attempts"]),
            set_of_pegs(*data["available_pegs"]),
        )
    if kind == "GuessMade":
        return GuessMade(game_id, _guess_from_dict(data["guess"]))
    if kind == "GameWon":
        return GameWon(game_id)
    if kind == "GameLost":
        return GameLost(game_id)
    raise ValueError(f"Unknown event type: {kind!r}")
