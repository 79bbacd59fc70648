from __future__ import annotations
from enum import StrEnum
from functools import lru_cache
from math import factorial, isqrt
from typing import Dict, Iterable, List, Optional, Tuple
import random

Tiles = Tuple[int, ...]


class MalformedInput(ValueError):
    """Caller-supplied configuration is not a valid N×N board."""


class InvalidMove(ValueError):
    """The blank cannot move in the requested direction."""


class Direction(StrEnum):
    """Direction the blank travels; the neighbouring tile slides the other way."""
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def inverse(self) -> "Direction":
        return _INVERSE[self]


_DELTA: Dict[Direction, Tuple[int, int]] = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

_INVERSE: Dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


def _side(count: int) -> int:
    n = isqrt(count)
    if n * n != count or n < 2:
        raise MalformedInput(f"{count} cells do not form an N×N grid with N >= 2")
    return n


@lru_cache(maxsize=None)
def goal_tiles(size: int) -> Tiles:
    return tuple(list(range(1, size * size)) + [0])


class Board:
    """Immutable N×N sliding-tile configuration (0 is the blank).

    Tiles are stored row-major; ``blank_x`` is the blank's column and
    ``blank_y`` its row. Equality and hashing depend on the tile layout only,
    so two boards reached along different paths are the same state.

    The public constructor validates everything; boards produced by
    :meth:`apply_move` skip validation because a legal move preserves it.
    """
    __slots__ = ("size", "tiles", "blank_x", "blank_y", "_hash")

    def __init__(self, tiles: Iterable[int], blank_x: Optional[int] = None,
                 blank_y: Optional[int] = None):
        tiles = tuple(tiles)
        if not all(isinstance(t, int) and not isinstance(t, bool) for t in tiles):
            raise MalformedInput("tile values must be integers")
        size = _side(len(tiles))
        if sorted(tiles) != list(range(size * size)):
            raise MalformedInput(
                f"tiles must be a permutation of 0..{size * size - 1}, got {tiles}"
            )
        y, x = divmod(tiles.index(0), size)
        if blank_x is None and blank_y is None:
            blank_x, blank_y = x, y
        elif blank_x is None or blank_y is None:
            raise MalformedInput("blank_x and blank_y must be given together")
        elif not (0 <= blank_x < size and 0 <= blank_y < size):
            raise MalformedInput(f"blank ({blank_x}, {blank_y}) is outside the {size}×{size} grid")
        elif (blank_x, blank_y) != (x, y):
            raise MalformedInput(
                f"blank given at ({blank_x}, {blank_y}) but the 0 tile sits at ({x}, {y})"
            )
        self._init(size, tiles, blank_x, blank_y)

    def _init(self, size: int, tiles: Tiles, blank_x: int, blank_y: int) -> None:
        object.__setattr__(self, "size", size)
        object.__setattr__(self, "tiles", tiles)
        object.__setattr__(self, "blank_x", blank_x)
        object.__setattr__(self, "blank_y", blank_y)
        object.__setattr__(self, "_hash", hash(tiles))

    @classmethod
    def _spawn(cls, size: int, tiles: Tiles, blank_x: int, blank_y: int) -> "Board":
        b = cls.__new__(cls)
        b._init(size, tiles, blank_x, blank_y)
        return b

    @classmethod
    def from_pieces(cls, pieces: Iterable[int], blank_x: int, blank_y: int) -> "Board":
        """Build a board from the N²−1 non-blank tiles and the blank's (x, y).

        The grid size is implied by the number of pieces; the blank is
        inserted at row ``blank_y``, column ``blank_x``.
        """
        pieces = tuple(pieces)
        size = _side(len(pieces) + 1)
        if not (0 <= blank_x < size and 0 <= blank_y < size):
            raise MalformedInput(f"blank ({blank_x}, {blank_y}) is outside the {size}×{size} grid")
        if 0 in pieces:
            raise MalformedInput("pieces must not contain the blank (0)")
        i = blank_y * size + blank_x
        return cls(pieces[:i] + (0,) + pieces[i:], blank_x, blank_y)

    @classmethod
    def goal(cls, size: int) -> "Board":
        return cls._spawn(size, goal_tiles(size), size - 1, size - 1)

    # ---------- immutability / identity ----------
    def __setattr__(self, name, value):
        raise AttributeError("Board is immutable")

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return self.tiles == other.tiles

    def __hash__(self) -> int:
        return self._hash

    def __repr__(self) -> str:
        return f"Board({self.tiles!r}, blank_x={self.blank_x}, blank_y={self.blank_y})"

    def __str__(self) -> str:
        lines = []
        for r in range(self.size):
            row = self.tiles[r * self.size:(r + 1) * self.size]
            lines.append(" ".join("--" if t == 0 else f"{t:>2}" for t in row))
        return "\n".join(lines)

    # ---------- moves ----------
    def legal_moves(self) -> Tuple[Direction, ...]:
        """Directions the blank can travel, in UP, DOWN, LEFT, RIGHT order."""
        n = self.size
        out: List[Direction] = []
        if self.blank_y > 0:     out.append(Direction.UP)
        if self.blank_y < n - 1: out.append(Direction.DOWN)
        if self.blank_x > 0:     out.append(Direction.LEFT)
        if self.blank_x < n - 1: out.append(Direction.RIGHT)
        return tuple(out)

    def apply_move(self, direction: Direction) -> "Board":
        dx, dy = _DELTA[direction]
        x, y = self.blank_x + dx, self.blank_y + dy
        n = self.size
        if not (0 <= x < n and 0 <= y < n):
            raise InvalidMove(
                f"blank at ({self.blank_x}, {self.blank_y}) cannot move {Direction(direction).value}"
            )
        z = self.blank_y * n + self.blank_x
        j = y * n + x
        lst = list(self.tiles)
        lst[z], lst[j] = lst[j], lst[z]
        return Board._spawn(n, tuple(lst), x, y)

    def successors(self) -> List[Tuple[Direction, "Board"]]:
        """Return list of (move, next_board). Unit edge costs."""
        return [(d, self.apply_move(d)) for d in self.legal_moves()]

    def is_goal(self) -> bool:
        return self.tiles == goal_tiles(self.size)


def goal_board(size: int) -> Board:
    if size < 2:
        raise MalformedInput(f"grid size must be >= 2, got {size}")
    return Board.goal(size)


def apply_moves(board: Board, moves: Iterable[Direction]) -> Board:
    for m in moves:
        board = board.apply_move(m)
    return board


# ---------- solvability ----------
# Longest optimal solution over all solvable boards of each size.
MAX_OPTIMAL_MOVES: Dict[int, int] = {2: 6, 3: 31, 4: 80}


def max_solution_length(size: int) -> int:
    """Upper bound on the optimal solution length of any solvable size×size board.

    Exact for N <= 4; larger grids fall back to the number of reachable
    boards minus one, since a shortest path never repeats a board.
    """
    if size in MAX_OPTIMAL_MOVES:
        return MAX_OPTIMAL_MOVES[size]
    return factorial(size * size) // 2 - 1


def inversions(board: Board) -> int:
    arr = [x for x in board.tiles if x != 0]
    inv = 0
    for i in range(len(arr)):
        for j in range(i + 1, len(arr)):
            if arr[i] > arr[j]:
                inv += 1
    return inv


def is_solvable(board: Board) -> bool:
    """Solvability rules:
       - N odd: inversions must be even
       - N even: (inversions + blank_row_from_bottom) must be ODD
         (row count is 1-based from the bottom)
    """
    inv = inversions(board)
    if board.size % 2 == 1:
        return (inv % 2) == 0
    blank_row_from_bottom = board.size - board.blank_y
    return ((inv + blank_row_from_bottom) % 2) == 1


# ---------- instance generation ----------
def scramble(size: int, depth: int, seed: int) -> Board:
    """Depth-limited random walk from the goal with no immediate backtrack."""
    rng = random.Random(seed)
    b = goal_board(size)
    last: Optional[Direction] = None
    for _ in range(depth):
        cand = list(b.legal_moves())
        if last is not None and last.inverse in cand and len(cand) > 1:
            cand.remove(last.inverse)
        last = rng.choice(cand)
        b = b.apply_move(last)
    return b


def make_unsolvable_variant(board: Board) -> Board:
    """Swap the first two non-blank tiles, flipping permutation parity."""
    lst = list(board.tiles)
    i = next(k for k, v in enumerate(lst) if v != 0)
    j = next(k for k, v in enumerate(lst[i + 1:], start=i + 1) if v != 0)
    lst[i], lst[j] = lst[j], lst[i]
    return Board._spawn(board.size, tuple(lst), board.blank_x, board.blank_y)
