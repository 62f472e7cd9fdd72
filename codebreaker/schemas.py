"""
Explicit validation & Pydantic models
- Models are used to validate and serialize/deserialize data
  exchanged between the client and server.
- Defines the structure of API requests and responses.
"""

from typing import List, Literal, Optional
from pydantic import BaseModel, Field, field_validator

from .domain import Guess
from .projection import GameView

Status = Literal["not_started", "in_progress", "won", "lost"]


# 1. Represents response when a new game is started
class NewGameResponse(BaseModel):
    game_id: str = Field(..., description="Unique ID for the game; secret is never returned")
    code_length: int = Field(..., description="How many pegs a guess must have")
    attempts_left: int = Field(..., description="How many guesses remain")
    available_pegs: List[str] = Field(..., description="Pegs a guess may use")
    status: Status = Field(..., description="Current state of the game")
    difficulty: Literal["easy", "medium", "hard"] = Field(..., description="Chosen difficulty level")


# 2. Validates player's guess
class GuessRequest(BaseModel):
    guess: List[str] = Field(
        ..., description="Peg names, one per position. Length and allowed pegs depend on the game."
    )

    @field_validator("guess")
    @classmethod
    def strip_names(cls, guess_list: List[str]) -> List[str]:
        """
        Only normalise whitespace here. Length and peg checks belong to the
        game engine, which knows the secret length and the peg set.
        """
        return [name.strip() for name in guess_list]

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"guess": ["Red", "Green", "Blue", "Yellow"]},          # medium (default)
                {"guess": ["Red", "Green", "Blue"]},                    # easy
                {"guess": ["Red", "Green", "Blue", "Yellow", "Pink"]},  # hard
            ]
        }
    }


# 3. Describes the feedback for a single guess
class GuessEntryOut(BaseModel):
    guess: List[str] = Field(..., description="The player's guess")
    black: int = Field(..., description="Pegs with the right color in the right position")
    white: int = Field(..., description="Pegs with the right color in the wrong position")
    feedback: List[str] = Field(..., description="Feedback pegs, black first then white")
    outcome: Literal["in_progress", "won", "lost"] = Field(..., description="Outcome after this guess")
    message: str = Field(..., description="Feedback message")

    @classmethod
    def from_guess(cls, guess: Guess) -> "GuessEntryOut":
        feedback = guess.feedback
        if not feedback.pegs:
            message = "all incorrect"
        else:
            message = f"{feedback.black_count} black and {feedback.white_count} white"
        return cls(
            guess=guess.code.names(),
            black=feedback.black_count,
            white=feedback.white_count,
            feedback=[peg.formatted_name() for peg in feedback.pegs],
            outcome=feedback.outcome.value,
            message=message,
        )


# 4. Represents the overall state of the game
class GameState(BaseModel):
    game_id: str = Field(..., description="Unique ID for the game")
    code_length: int = Field(..., description="How many pegs a guess must have")
    attempts_left: int = Field(..., description="How many guesses remain")
    available_pegs: List[str] = Field(..., description="Pegs a guess may use")
    status: Status = Field(..., description="Current state of the game")
    history: List[GuessEntryOut] = Field(..., description="All guesses made so far with feedback")

    @classmethod
    def from_view(cls, game_id: str, view: GameView) -> "GameState":
        return cls(
            game_id=game_id,
            code_length=view.secret_length,
            attempts_left=view.attempts_left,
            available_pegs=sorted(peg.name for peg in view.available_pegs),
            status=view.status,
            history=[GuessEntryOut.from_guess(g) for g in view.guesses],
        )


# 5. Result of a guess (or end of the game)
class GuessResponse(BaseModel):
    attempts_left: int = Field(..., description="How many guesses remain")
    status: Status = Field(..., description="Current state of the game")
    feedback: GuessEntryOut = Field(..., description="Feedback for this guess")
    secret: Optional[List[str]] = Field(None, description="The secret code (only revealed if game is over)")
    note: Optional[str] = Field(None, description="Extra note (ex. 'Game lost. No more guesses.')")


# 6. Peg vocabulary
class PegsOut(BaseModel):
    pegs: List[str] = Field(..., description="Default pegs for new games")
