"""Session history logging for the Impostor word game"""

from .storage import GameLogger

__all__ = ["GameLogger"]
