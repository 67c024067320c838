from backend.engine.gameplay.controller import PuzzleController

__all__ = ["PuzzleController"]
