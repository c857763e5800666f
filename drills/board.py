"""A 5x5 table holding one robot, and the commands that drive it."""

from __future__ import annotations

import itertools
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from drills.robot import Facing, Robot

BOARD_LIMIT_X = 5
BOARD_LIMIT_Y = 5


class BoardError(ValueError):
    """Raised when a board or a robot move is not allowed."""


@dataclass
class Board:
    """A table with the robot's position and the robot itself."""

    id: int
    robot_x: int
    robot_y: int
    robot: Robot = field(default_factory=Robot)

    def validate(self) -> None:
        """Raise BoardError if the robot is off the table."""
        if not 0 <= self.robot_x < BOARD_LIMIT_X:
            raise BoardError("robot x out of bounds")
        if not 0 <= self.robot_y < BOARD_LIMIT_Y:
            raise BoardError("robot y out of bounds")

    def move_robot(self) -> None:
        """Step the robot forward, refusing any step off the table."""
        x, y = self.robot.move(self.robot_x, self.robot_y)
        try:
            Board(0, x, y, self.robot).validate()
        except BoardError as err:
            raise BoardError("Robot would fall off the board") from err
        self.robot_x, self.robot_y = x, y

    def left(self) -> None:
        self.robot.left()

    def right(self) -> None:
        self.robot.right()

    def move(self) -> None:
        self.move_robot()

    def report(self) -> tuple[int, int, int]:
        """Return ``(x, y, facing)``."""
        return self.robot_x, self.robot_y, self.robot.facing


_ids = itertools.count(1)
_boards: list[Board] = []


def new_board(robot_x: int, robot_y: int, facing: int) -> Board:
    """Create and register a board with the robot at ``(robot_x, robot_y)``."""
    board = Board(next(_ids), robot_x, robot_y, Robot(facing))
    board.validate()
    try:
        board.robot.validate()
    except ValueError as err:
        raise BoardError(str(err)) from err
    _boards.append(board)
    return board


def place(x: int, y: int, facing: int) -> int:
    """Create a new board with the robot placed on it and return its id."""
    return new_board(x, y, facing).id


class Command(ABC):
    """An instruction issued against a board, returning the board id."""

    @abstractmethod
    def issue(self, board: Board | None) -> int:
        """Carry out the command and return the affected board's id."""


@dataclass
class Place(Command):
    x: int
    y: int
    facing: int = Facing.NORTH

    def issue(self, board: Board | None = None) -> int:
        return place(self.x, self.y, self.facing)


@dataclass
class Left(Command):
    def issue(self, board: Board) -> int:
        board.left()
        return board.id


@dataclass
class Move(Command):
    def issue(self, board: Board) -> int:
        board.move()
        return board.id


@dataclass
class Right(Command):
    def issue(self, board: Board) -> int:
        board.right()
        return board.id