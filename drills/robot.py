"""A robot facing a compass point, stepping one square at a time."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class Facing(IntEnum):
    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3


def move_north(x, y):
    return x, y + 1


def move_east(x, y):
    return x + 1, y


def move_south(x, y):
    return x, y - 1


def move_west(x, y):
    return x - 1, y


_COMPASS = (move_north, move_east, move_south, move_west)


@dataclass
class Robot:
    facing: int = Facing.NORTH

    def validate(self) -> None:
        if not Facing.NORTH <= self.facing <= Facing.WEST:
            raise ValueError("Robot must be facing to a valid compass point")

    def left(self) -> None:
        self.facing = Facing.WEST if self.facing - 1 < 0 else Facing(self.facing - 1)

    def right(self) -> None:
        self.facing = Facing.NORTH if self.facing + 1 > 3 else Facing(self.facing + 1)

    def move(self, x, y):
        """Return the position one step ahead of ``(x, y)``."""
        self.validate()
        return _COMPASS[self.facing](x, y)