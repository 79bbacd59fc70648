from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Tuple

from npuzzle.domains.board import Board, Direction


@dataclass(eq=False, slots=True)
class SearchNode:
    board: Board
    g: int
    parent: Optional["SearchNode"] = None
    move_taken: Optional[Direction] = None
    f: int = 0


def reconstruct_path(node: Optional[SearchNode]) -> Tuple[List[Board], List[Direction]]:
    """Walk parent links back to the root; returns (boards, moves) root first."""
    boards: List[Board] = []
    moves: List[Direction] = []
    while node is not None:
        boards.append(node.board)
        if node.move_taken is not None:
            moves.append(node.move_taken)
        node = node.parent
    boards.reverse()
    moves.reverse()
    return boards, moves
