from npuzzle.domains.board import Board


def taxicab(board: Board) -> int:
    """Sum of taxicab (Manhattan) distances to goal positions (blank ignored)."""
    n = board.size
    dist = 0
    for idx, tile in enumerate(board.tiles):
        if tile == 0:
            continue
        r1, c1 = divmod(idx, n)
        r2, c2 = divmod(tile - 1, n)
        dist += abs(r1 - r2) + abs(c1 - c2)
    return dist
