from __future__ import annotations
from typing import Callable, Dict

from npuzzle.domains.board import Board
from npuzzle.heuristics.num_incorrect import num_incorrect
from npuzzle.heuristics.taxicab import taxicab
from npuzzle.search.a_star import a_star
from npuzzle.search.bfs import bfs
from npuzzle.search.dfs import dfs, iddfs
from npuzzle.search.ida_star import ida_star
from npuzzle.search.result import SearchResult

HEURISTICS: Dict[str, Callable[[Board], int]] = {
    "taxicab": taxicab,
    "num-incorrect": num_incorrect,
}

ALGORITHMS: Dict[str, Callable[..., SearchResult]] = {
    "a-star": a_star,
    "ida-star": ida_star,
    "bfs": bfs,
    "dfs": dfs,
    "id-dfs": iddfs,
}

INFORMED = ("a-star", "ida-star")


def choose_hfun(name: str) -> Callable[[Board], int]:
    try:
        return HEURISTICS[name]
    except KeyError:
        raise ValueError(f"unknown heuristic {name!r}, expected one of {sorted(HEURISTICS)}") from None


def solve(board: Board, algorithm: str = "a-star", heuristic: str = "taxicab", **opts) -> SearchResult:
    """Run one search strategy on ``board``.

    The heuristic is only consulted by the informed strategies. Remaining
    keyword options (``timeout_sec``, ``max_expansions``, ``return_path``,
    ``tie_break``, ...) are passed straight to the engine.
    """
    if algorithm not in ALGORITHMS:
        raise ValueError(f"unknown algorithm {algorithm!r}, expected one of {sorted(ALGORITHMS)}")
    engine = ALGORITHMS[algorithm]
    if algorithm in INFORMED:
        return engine(board, hfun=choose_hfun(heuristic), **opts)
    return engine(board, **opts)
