"""Simulation helpers for the Impostor word game"""

from .dummy_players import DummyTable

__all__ = ["DummyTable"]
