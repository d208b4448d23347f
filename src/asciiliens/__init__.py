"""
ASCIIliens: a turn based ASCII invaders game.
"""

from asciiliens.simulation import Command, Engine, GameState

__all__ = ["Command", "Engine", "GameState"]
