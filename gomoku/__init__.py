"""Five-in-a-row board, pattern-scoring computer opponent, click-driven player and turn loop."""

__version__ = "0.1.0"
__all__ = ["board", "ai", "player", "game"]