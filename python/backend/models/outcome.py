"""Game phases, outcomes and move results."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class GameOutcome(StrEnum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


class GamePhase(StrEnum):
    """Setup -> Shuffling -> Playing -> Won | Lost."""

    SETUP = "setup"
    SHUFFLING = "shuffling"
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"

    @property
    def is_terminal(self) -> bool:
        return self in (GamePhase.WON, GamePhase.LOST)

    @property
    def outcome(self) -> GameOutcome:
        if self is GamePhase.WON:
            return GameOutcome.WON
        if self is GamePhase.LOST:
            return GameOutcome.LOST
        return GameOutcome.IN_PROGRESS


@dataclass(frozen=True)
class MoveResult:
    """What a single move attempt did.

    ``moved_from`` / ``moved_to`` name the swapped cells so a host can
    animate the tile; both are ``None`` when the move was rejected.
    """

    accepted: bool
    outcome: GameOutcome
    move_count: int
    moved_from: int | None = None
    moved_to: int | None = None
