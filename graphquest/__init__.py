"""Text-mode maze game with items, a time limit and CSV-defined maps, plus the containers it uses."""

__version__ = "0.1.0"
__all__ = ["containers", "game", "heap", "maze", "textio"]