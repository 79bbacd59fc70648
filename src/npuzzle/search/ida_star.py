from __future__ import annotations
from typing import Callable, List, Optional, Set
import math

from npuzzle.domains.board import Board, Direction, is_solvable, max_solution_length
from npuzzle.heuristics.taxicab import taxicab
from npuzzle.search.result import Budget, SearchResult, Termination


def ida_star(
    start: Board,
    hfun: Callable[[Board], int] = taxicab,
    return_path: bool = True,
    timeout_sec: Optional[float] = None,
    max_expansions: Optional[int] = None,
    check_solvable: bool = True,
) -> SearchResult:
    """
    IDA* with instrumentation.

    Each iteration is a depth-first search that only expands boards with
    g + h <= bound; the next bound is the smallest f that was cut off. Memory
    is the current path only: the move undoing the last one is never
    generated and boards already on the path are skipped, which keeps every
    iteration finite. With ``check_solvable=False`` an unsolvable board is
    reported once the next bound would exceed the longest optimal solution
    possible for its grid size (31 moves on 3×3, 80 on 4×4).
    """
    budget = Budget(timeout_sec, max_expansions)
    FOUND = object()
    OVER_BUDGET = object()

    expanded = 0
    generated = 0
    duplicates = 0
    max_depth = 0
    solution_g: Optional[int] = None

    path: List[Board] = [start]
    moves: List[Direction] = []
    on_path: Set[Board] = {start}

    def dfs(board: Board, g: int, bound: int, h_s: int, last: Optional[Direction]):
        """
        Depth-first step. Returns:
            * OVER_BUDGET   if the budget ran out
            * FOUND         if the goal was reached (path/moves hold the solution)
            * next bound    the minimal f that exceeded 'bound' in this subtree
        """
        nonlocal expanded, generated, duplicates, max_depth, solution_g
        max_depth = max(max_depth, g)
        f_here = g + h_s
        if f_here > bound:
            return f_here
        if board.is_goal():
            solution_g = g
            return FOUND
        if budget.exceeded(expanded):
            return OVER_BUDGET

        expanded += 1
        min_next = math.inf

        for move in board.legal_moves():
            if last is not None and move is last.inverse:
                continue
            b2 = board.apply_move(move)
            if b2 in on_path:
                duplicates += 1
                continue
            generated += 1

            path.append(b2)
            moves.append(move)
            on_path.add(b2)

            t = dfs(b2, g + 1, bound, hfun(b2), move)

            if t is OVER_BUDGET or t is FOUND:
                return t
            if t < min_next:
                min_next = t

            on_path.remove(b2)
            moves.pop()
            path.pop()

        return min_next

    def finish(termination: Termination, bound: Optional[int]) -> SearchResult:
        res = SearchResult(
            algorithm="IDA*", termination=termination,
            expanded=expanded, generated=generated, duplicates=duplicates,
            peak_recursion=max_depth, bound_final=bound,
            time=budget.elapsed(),
        )
        if termination is Termination.OK:
            res.g = solution_g
            if return_path:
                res.path, res.moves = list(path), list(moves)
        return res

    if check_solvable and not is_solvable(start):
        return finish(Termination.NO_SOLUTION, None)

    # no solvable board needs more moves than this, so a larger bound means no solution
    max_bound = max_solution_length(start.size)
    h0 = hfun(start)
    bound = h0
    while True:
        t = dfs(start, 0, bound, h0, None)
        if t is OVER_BUDGET:
            return finish(Termination.BUDGET_EXCEEDED, bound)
        if t is FOUND:
            return finish(Termination.OK, bound)
        if t == math.inf or t > max_bound:
            return finish(Termination.NO_SOLUTION, bound)
        bound = int(t)
