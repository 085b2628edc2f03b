"""
Duel Player

A participant in a level, modeled by its health alone.
"""
from dataclasses import dataclass

from .config import PLAYER_START_HEALTH


@dataclass
class Player:
    """One participant of a level."""
    health: int = PLAYER_START_HEALTH
