"""
Single place to read settings from the environment.

- Load a local .env if present (dev convenience; in prod the platform injects env vars)
- Expose the database URL, app environment, log level and random.org switches
- Difficulty presets and the default peg vocabulary
"""

import os
from typing import Dict, Tuple

from dotenv import load_dotenv

from .domain import PegColor
from .types import Difficulty, PegName

load_dotenv()

# Local SQLite file unless the environment says otherwise
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite+pysqlite:///./codebreaker.db")

# "local" auto-creates tables at startup; tests set "test"
APP_ENV = os.getenv("APP_ENV", "local")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

RANDOM_ORG_ENABLED = os.getenv("RANDOM_ORG_ENABLED", "true").lower() in ("1", "true", "yes")
RANDOM_TIMEOUT_SECONDS = float(os.getenv("RANDOM_TIMEOUT_SECONDS", "3.0"))

# difficulty -> (code length, attempts)
DIFFICULTY_PRESETS: Dict[Difficulty, Tuple[int, int]] = {
    "easy": (3, 8),
    "medium": (4, 10),
    "hard": (5, 12),
}
DEFAULT_DIFFICULTY: Difficulty = "medium"

DEFAULT_PEGS: Tuple[PegName, ...] = tuple(color.value for color in PegColor)
