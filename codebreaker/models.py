"""
SQLAlchemy ORM model for the event log.

Table:
- events: one row per game event, in append order per game

The (game_id, sequence) pair is unique. Two writers that read the same history
and both try to append will collide on it, and the second append fails.

Payloads are stored as JSON (see serialization.py).
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import String, Integer, DateTime, JSON, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from .db import Base


class EventRecord(Base):
    __tablename__ = "events"
    __table_args__ = (UniqueConstraint("game_id", "sequence", name="uq_events_game_sequence"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # uuid4 text, generated by the host
    game_id: Mapped[str] = mapped_column(String(36), index=True, nullable=False)

    # 0-based position of the event within its game's log
    sequence: Mapped[int] = mapped_column(Integer, nullable=False)

    # "GameStarted" | "GuessMade" | "GameWon" | "GameLost"
    type: Mapped[str] = mapped_column(String(32), nullable=False)
    payload: Mapped[dict] = mapped_column(JSON, nullable=False)

    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=datetime.utcnow)
