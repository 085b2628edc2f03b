"""
Duel Configuration
Contains game constants.
"""

# Player
PLAYER_START_HEALTH = 100

# Level layout
LEVEL_PLAYER_COUNT = 2
LEVEL_TILE_COUNT = 10

# Tile values are single unsigned bytes
TILE_MIN = 0
TILE_MAX = 255
