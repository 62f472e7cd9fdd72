'''
Event-sourced Codebreaker API

Endpoints:
POST /games                -> start a game
GET  /games/{id}           -> read state & history
POST /games/{id}/guess     -> submit a guess
GET  /pegs                 -> default peg vocabulary

Every request loads the game's event log, lets the engine decide, and appends
whatever events it returned. Games live in the database (SQLEventStore).
'''

import logging

from fastapi import FastAPI, HTTPException, Depends
from fastapi.middleware.cors import CORSMiddleware

from . import config
from .random_client import fetch_code
from .db import get_db                  # SQLAlchemy Session dependency
from .repository import SQLEventStore   # DB-backed event log
from .bootstrap_db import create_all    # dev-only: create tables
from .domain import GameError, GameFinishError, GameNotStarted
from .service import GameService, describe_error
from .store import ConcurrentAppendError

from .schemas import (
    NewGameResponse,
    GuessRequest,
    GuessResponse,
    GameState,
    GuessEntryOut,
    PegsOut,
)

logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title="Codebreaker API", version="3.0.0")

# Allow everything in dev so the docs and front-end work easily
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"]
)

# --- Dev convenience: auto-create tables locally ---
if config.APP_ENV == "local":
    @app.on_event("startup")
    def _dev_create_tables():
        create_all()


# Small factory so routes get a per-request service (bound to the current DB session)
def get_service(session = Depends(get_db)) -> GameService:
    return GameService(SQLEventStore(session))


def _raise_for(error: GameError) -> None:
    if isinstance(error, GameNotStarted):
        status_code = 404
    elif isinstance(error, GameFinishError):
        status_code = 409
    else:
        status_code = 400
    raise HTTPException(
        status_code=status_code,
        detail={"error": type(error).__name__, "message": describe_error(error)},
    )


# ---------------- Routes ----------------

@app.post("/games", response_model=NewGameResponse, summary="Start a new game")
def start_game(
    difficulty: str = config.DEFAULT_DIFFICULTY,
    service: GameService = Depends(get_service),
) -> NewGameResponse:
    """
    Difficulty presets:
      easy   -> length=3, attempts=8
      medium -> length=4, attempts=10
      hard   -> length=5, attempts=12
    """
    if difficulty not in config.DIFFICULTY_PRESETS:
        difficulty = config.DEFAULT_DIFFICULTY
    length, attempts = config.DIFFICULTY_PRESETS[difficulty]

    secret = fetch_code(length, config.DEFAULT_PEGS)  # random.org w/ secure fallback
    game_id, _ = service.start(secret, attempts, config.DEFAULT_PEGS)
    view = service.view(game_id)

    return NewGameResponse(
        game_id=game_id,
        code_length=view.secret_length,
        attempts_left=view.attempts_left,
        available_pegs=sorted(peg.name for peg in view.available_pegs),
        status=view.status,
        difficulty=difficulty,
    )


@app.get("/games/{game_id}", response_model=GameState, summary="Get current game state")
def get_game(
    game_id: str,
    service: GameService = Depends(get_service),
) -> GameState:
    view = service.view(game_id)
    if view is None:
        raise HTTPException(status_code=404, detail="Game not found")
    return GameState.from_view(game_id, view)


@app.post("/games/{game_id}/guess", response_model=GuessResponse, summary="Submit a guess")
def submit_guess(
    game_id: str,
    payload: GuessRequest,
    service: GameService = Depends(get_service),
) -> GuessResponse:
    try:
        result = service.guess(game_id, payload.guess)
    except ConcurrentAppendError as exc:
        logger.warning("%s", exc)
        raise HTTPException(status_code=409, detail=str(exc))

    if isinstance(result, GameError):
        _raise_for(result)

    # result[0] is always the GuessMade; a terminal event may follow it
    guess_made = result[0]
    view = service.view(game_id)

    # When the game ends, include the secret in the response
    secret = None
    note = None
    if view.status != "in_progress":
        revealed = service.revealed_secret(game_id)
        secret = revealed.names() if revealed is not None else None
        note = f"Game {view.status}. No more guesses allowed."

    return GuessResponse(
        attempts_left=view.attempts_left,
        status=view.status,
        feedback=GuessEntryOut.from_guess(guess_made.guess),
        secret=secret,
        note=note,
    )


@app.get("/pegs", response_model=PegsOut, summary="Default peg vocabulary")
def get_pegs() -> PegsOut:
    return PegsOut(pegs=list(config.DEFAULT_PEGS))
