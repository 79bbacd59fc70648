from npuzzle.domains.board import Board


def num_incorrect(board: Board) -> int:
    """Number of non-blank tiles outside their goal cell."""
    return sum(1 for idx, tile in enumerate(board.tiles) if tile != 0 and tile != idx + 1)
