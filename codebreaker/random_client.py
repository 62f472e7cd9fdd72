"""
- HTTP call with clear fallback
Pick the pegs of a secret code using random.org. If anything goes wrong (no
internet, timeout, bad response), we fall back to a local secure random
generator so the game still works.
"""

import logging
from secrets import randbelow
from typing import List, Sequence

import requests

from . import config
from .domain import Code
from .types import PegName

logger = logging.getLogger(__name__)

RANDOM_URL = "https://www.random.org/integers/"


def _fetch_indices(length: int, upper: int) -> List[int]:
    params = {
        "num": length,      # how many numbers we want
        "min": 0,           # smallest allowed index
        "max": upper - 1,   # largest allowed index
        "col": 1,           # one number per line
        "base": 10,
        "format": "plain",
        "rnd": "new",
    }
    response = requests.get(RANDOM_URL, params=params, timeout=config.RANDOM_TIMEOUT_SECONDS)
    response.raise_for_status()

    # The body looks like:
    #   0\n3\n1\n2\n
    indices = [int(line) for line in response.text.splitlines() if line.strip()]

    if len(indices) != length:
        raise ValueError(f"random.org returned {len(indices)} values, expected {length}.")
    if any(index < 0 or index >= upper for index in indices):
        raise ValueError(f"random.org number out of range 0..{upper - 1}.")
    return indices


def fetch_code(length: int = 4, pegs: Sequence[PegName] = config.DEFAULT_PEGS) -> Code:
    if not pegs:
        raise ValueError("Cannot build a code from an empty peg vocabulary.")

    indices = None
    if config.RANDOM_ORG_ENABLED:
        try:
            indices = _fetch_indices(length, len(pegs))
        except (requests.RequestException, ValueError) as exc:
            logger.info("random.org unavailable (%s); using local secure random", exc)

    if indices is None:
        indices = [randbelow(len(pegs)) for _ in range(length)]

    return Code.of(*(pegs[index] for index in indices))
