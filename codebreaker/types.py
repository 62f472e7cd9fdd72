"""
Labels for clarity.
"""

from typing import Literal

GameId = str  # uuid4 text, generated by the host
PegName = str  # "Red", "Green", ...
GameStatus = Literal["not_started", "in_progress", "won", "lost"]
Difficulty = Literal["easy", "medium", "hard"]
