"""
Pure game logic (no HTTP, no storage).
For each guess we hand back one feedback peg per hit:
- BLACK: the peg matches the secret at the same position
- WHITE: the peg appears elsewhere in the secret, not already matched

Black pegs come first, then white pegs. Duplicates are allowed in both the
secret and the guess; a secret peg can only ever be matched once.
"""

import logging
from typing import Sequence, Tuple

from . import projection
from .domain import Code, Feedback, FeedbackPeg, Game, Outcome, Peg

logger = logging.getLogger(__name__)


def exact_hits(secret_pegs: Sequence[Peg], guess_pegs: Sequence[Peg]) -> list[Peg]:
    return [guess_peg for secret_peg, guess_peg in zip(secret_pegs, guess_pegs) if secret_peg == guess_peg]


def color_hits(secret_pegs: Sequence[Peg], guess_pegs: Sequence[Peg]) -> list[Peg]:
    """
    Example:
      secret = [Red, Green, Blue, Yellow]
      guess  = [Red, Purple, Blue, Blue]
      positions 0 and 2 are exact, so only [Green, Yellow] vs [Purple, Blue]
      are compared here -> no color hits.
    """
    # Only positions that were not exact hits take part
    remaining_secret = []
    remaining_guess = []
    for secret_peg, guess_peg in zip(secret_pegs, guess_pegs):
        if secret_peg != guess_peg:
            remaining_secret.append(secret_peg)
            remaining_guess.append(guess_peg)

    # Each secret peg can be claimed once: remove it on first match
    hits = []
    for guess_peg in remaining_guess:
        if guess_peg in remaining_secret:
            remaining_secret.remove(guess_peg)
            hits.append(guess_peg)
    return hits


def feedback_pegs(secret_pegs: Sequence[Peg], guess_pegs: Sequence[Peg]) -> Tuple[FeedbackPeg, ...]:
    blacks = [FeedbackPeg.BLACK for _ in exact_hits(secret_pegs, guess_pegs)]
    whites = [FeedbackPeg.WHITE for _ in color_hits(secret_pegs, guess_pegs)]
    return tuple(blacks + whites)


def outcome_for(exact_count: int, secret_length: int, attempts_so_far: int, total_attempts: int) -> Outcome:
    # A full match on the last attempt is still a win
    if exact_count == secret_length:
        return Outcome.WON
    if attempts_so_far + 1 == total_attempts:
        return Outcome.LOST
    return Outcome.IN_PROGRESS


def feedback_on(game: Game, guess: Code) -> Feedback:
    """Score a guess that already passed validation against this game."""
    pegs = feedback_pegs(projection.secret_pegs(game), guess.pegs)
    exact_count = sum(1 for peg in pegs if peg is FeedbackPeg.BLACK)
    outcome = outcome_for(
        exact_count,
        projection.secret_length(game),
        projection.attempts(game),
        projection.total_attempts(game),
    )
    logger.debug("scored guess %s -> %s %s", guess.names(), outcome.value, [p.value for p in pegs])
    return Feedback(outcome, pegs)


def score_guess(secret: Code, guess: Code) -> Tuple[int, int]:
    """
    Returns a tuple: (black_count, white_count)
      secret = [Red, Green, Blue, Yellow]
      guess  = [Green, Red, Blue, Pink]
      -> (1, 2)
    """
    if secret.length != guess.length:
        raise ValueError("Secret and guess must be the same length.")
    pegs = feedback_pegs(secret.pegs, guess.pegs)
    black = sum(1 for peg in pegs if peg is FeedbackPeg.BLACK)
    return (black, len(pegs) - black)
