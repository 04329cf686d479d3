"""Engine layer: the game session driving movement, transfers and reset."""

from geocoin.engine.session import GameSession

__all__ = ["GameSession"]
