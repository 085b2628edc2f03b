"""
Duel
Two players on a ten-tile level.

Contents:
- Player (health)
- Level (two players, ten tiles)
- Self-test entry point (python -m duel.main)
"""
