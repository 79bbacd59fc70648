from __future__ import annotations
from typing import Callable, Dict, List, Optional, Set, Tuple
import heapq
import itertools
import math

from npuzzle.domains.board import Board, is_solvable
from npuzzle.heuristics.taxicab import taxicab
from npuzzle.search.node import SearchNode, reconstruct_path
from npuzzle.search.result import Budget, SearchResult, Termination

TIE_BREAKS = ("g", "h", "fifo", "lifo")


def priority_tuple(tie_break: str, f: int, g: int, h: int, ctr: int) -> Tuple[int, int, int]:
    """Open-list key; the insertion counter makes every key unique."""
    if tie_break == "g":    return (f, -g, ctr)
    if tie_break == "h":    return (f, h, ctr)
    if tie_break == "fifo": return (f, 0, ctr)
    if tie_break == "lifo": return (f, 0, -ctr)
    raise ValueError(f"unknown tie_break {tie_break!r}, expected one of {TIE_BREAKS}")


def a_star(
    start: Board,
    hfun: Callable[[Board], int] = taxicab,
    tie_break: str = "g",
    return_path: bool = True,
    timeout_sec: Optional[float] = None,
    max_expansions: Optional[int] = None,
    check_solvable: bool = True,
) -> SearchResult:
    """
    A* with instrumentation.

    The open list is a binary heap keyed by ``(f, tie, insertion_seq)``; with
    the default ``tie_break="g"`` equal-f nodes are taken deepest first.
    ``best_g`` maps every generated board to the cheapest g seen so far and a
    child that does not improve on it is dropped. Heap entries made stale by a
    later improvement are skipped when popped.
    """
    if tie_break not in TIE_BREAKS:
        raise ValueError(f"unknown tie_break {tie_break!r}, expected one of {TIE_BREAKS}")
    budget = Budget(timeout_sec, max_expansions)

    expanded = 0
    generated = 0
    duplicates = 0
    peak_open = 1
    peak_closed = 0

    def finish(termination: Termination, node: Optional[SearchNode] = None) -> SearchResult:
        res = SearchResult(
            algorithm="A*", termination=termination,
            expanded=expanded, generated=generated, duplicates=duplicates,
            peak_open=peak_open, peak_closed=peak_closed,
            time=budget.elapsed(), tie_break=tie_break,
        )
        if node is not None:
            res.g = node.g
            if return_path:
                res.path, res.moves = reconstruct_path(node)
        return res

    if check_solvable and not is_solvable(start):
        return finish(Termination.NO_SOLUTION)

    open_heap: List[Tuple[Tuple[int, int, int], SearchNode]] = []
    counter = itertools.count()

    h0 = hfun(start)
    root = SearchNode(board=start, g=0, f=h0)
    heapq.heappush(open_heap, (priority_tuple(tie_break, h0, 0, h0, next(counter)), root))

    best_g: Dict[Board, int] = {start: 0}
    closed: Set[Board] = set()

    while open_heap:
        peak_open = max(peak_open, len(open_heap))
        _, node = heapq.heappop(open_heap)
        board = node.board
        if board in closed or node.g > best_g[board]:
            continue

        if board.is_goal():
            return finish(Termination.OK, node)

        if budget.exceeded(expanded):
            return finish(Termination.BUDGET_EXCEEDED)

        closed.add(board)
        expanded += 1
        peak_closed = max(peak_closed, len(closed))

        g2 = node.g + 1
        for move, b2 in board.successors():
            generated += 1
            if g2 >= best_g.get(b2, math.inf):
                duplicates += 1
                continue
            best_g[b2] = g2
            closed.discard(b2)
            h2 = hfun(b2)
            child = SearchNode(board=b2, g=g2, parent=node, move_taken=move, f=g2 + h2)
            heapq.heappush(open_heap, (priority_tuple(tie_break, child.f, g2, h2, next(counter)), child))

    # Open exhausted without finding goal
    return finish(Termination.NO_SOLUTION)
