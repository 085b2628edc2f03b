"""
Duel Level

A level owns exactly two players and a row of ten tiles.
Both lengths are fixed when the level is built and cannot change afterwards.
"""
from dataclasses import dataclass, field
from typing import Iterator, Tuple, Union

from .config import LEVEL_PLAYER_COUNT, LEVEL_TILE_COUNT, TILE_MIN, TILE_MAX
from .player import Player


class Tiles:
    """Fixed-length row of single-byte tile values."""

    def __init__(self, size: int = LEVEL_TILE_COUNT):
        self._cells = bytearray(size)  # zero-initialized

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[int]:
        return iter(self._cells)

    def __getitem__(self, index: Union[int, slice]):
        if isinstance(index, slice):
            return bytes(self._cells[index])
        return self._cells[index]

    def __setitem__(self, index: Union[int, slice], value) -> None:
        if isinstance(index, slice):
            if isinstance(value, int):
                raise TypeError("can only assign a sequence of tile values to a slice")
            value = bytes(value)
            if len(value) != len(range(*index.indices(len(self._cells)))):
                raise ValueError("slice assignment would change the number of tiles")
        elif not TILE_MIN <= value <= TILE_MAX:
            raise ValueError(f"tile value must be in {TILE_MIN}..{TILE_MAX}, got {value}")
        self._cells[index] = value

    def __bytes__(self) -> bytes:
        return bytes(self._cells)

    def __eq__(self, other) -> bool:
        if isinstance(other, Tiles):
            return self._cells == other._cells
        if isinstance(other, (bytes, bytearray, memoryview, list, tuple)):
            try:
                return self._cells == bytes(other)
            except (TypeError, ValueError):
                return False
        return NotImplemented

    def __repr__(self) -> str:
        return f"Tiles({list(self._cells)})"


def _default_players() -> Tuple[Player, ...]:
    return tuple(Player() for _ in range(LEVEL_PLAYER_COUNT))


@dataclass(frozen=True)
class Level:
    """A game level: two players and ten tiles.

    Only default construction exists; the level builds its own players
    and tiles, so nothing is shared with the caller or another level.
    """
    players: Tuple[Player, ...] = field(default_factory=_default_players, init=False)
    tiles: Tiles = field(default_factory=Tiles, init=False)
