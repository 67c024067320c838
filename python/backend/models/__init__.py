from backend.models.config import GameConfig, InvalidConfigError
from backend.models.grid import EMPTY, Direction, GridState
from backend.models.outcome import GameOutcome, GamePhase, MoveResult

__all__ = [
    "EMPTY",
    "Direction",
    "GameConfig",
    "GameOutcome",
    "GamePhase",
    "GridState",
    "InvalidConfigError",
    "MoveResult",
]
