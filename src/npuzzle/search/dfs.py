from __future__ import annotations
from itertools import count
from typing import Dict, Iterator, List, Optional, Set, Tuple

from npuzzle.domains.board import Board, Direction
from npuzzle.search.result import Budget, SearchResult, Termination

Frame = Tuple[Board, int, Iterator[Tuple[Direction, Board]], Optional[Direction]]


def _depth_limited(start: Board, max_depth: Optional[int], budget: Budget,
                   stats: Dict[str, int]) -> Tuple[Termination, Optional[List[Frame]], bool]:
    """
    Iterative DFS with (a) per-path cycle avoidance and (b) optional depth bound.

    Returns (termination, stack_at_goal, cut_off) where ``cut_off`` tells
    whether any child was skipped because of the depth bound.
    """
    if start.is_goal():
        return Termination.OK, [(start, 0, iter(()), None)], False

    # stack holds: (board, depth, iterator_over_successors, move_into_board)
    stack: List[Frame] = [(start, 0, iter(start.successors()), None)]
    on_path: Set[Board] = {start}
    cut_off = False

    if budget.exceeded(stats["expanded"]):
        return Termination.BUDGET_EXCEEDED, None, cut_off
    stats["expanded"] += 1

    while stack:
        b, d, it, _ = stack[-1]
        stats["peak_depth"] = max(stats["peak_depth"], d)

        nxt = next(it, None)
        if nxt is None:
            # done with b
            on_path.remove(b)
            stack.pop()
            continue
        m, b2 = nxt

        # enforce depth bound on the *child*
        if max_depth is not None and d + 1 > max_depth:
            cut_off = True
            continue

        # avoid cycles along current path
        if b2 in on_path:
            stats["duplicates"] += 1
            continue

        stats["generated"] += 1
        if b2.is_goal():
            stack.append((b2, d + 1, iter(()), m))
            return Termination.OK, stack, cut_off

        if budget.exceeded(stats["expanded"]):
            return Termination.BUDGET_EXCEEDED, None, cut_off
        stats["expanded"] += 1

        # dive deeper
        on_path.add(b2)
        stack.append((b2, d + 1, iter(b2.successors()), m))

    # no solution within bound
    return Termination.NO_SOLUTION, None, cut_off


def _result(algorithm: str, termination: Termination, stack: Optional[List[Frame]],
            stats: Dict[str, int], budget: Budget, bound: Optional[int],
            return_path: bool) -> SearchResult:
    res = SearchResult(
        algorithm=algorithm, termination=termination,
        expanded=stats["expanded"], generated=stats["generated"],
        duplicates=stats["duplicates"], peak_recursion=stats["peak_depth"],
        bound_final=bound, time=budget.elapsed(),
    )
    if stack is not None:
        res.g = len(stack) - 1
        if return_path:
            res.path = [frame[0] for frame in stack]
            res.moves = [frame[3] for frame in stack[1:]]
    return res


def _fresh_stats() -> Dict[str, int]:
    return {"expanded": 0, "generated": 0, "duplicates": 0, "peak_depth": 0}


def dfs(
    start: Board,
    max_depth: Optional[int] = None,
    return_path: bool = True,
    timeout_sec: Optional[float] = None,
    max_expansions: Optional[int] = None,
) -> SearchResult:
    """Depth-first search; the first path found is returned, not the shortest."""
    budget = Budget(timeout_sec, max_expansions)
    stats = _fresh_stats()
    termination, stack, _ = _depth_limited(start, max_depth, budget, stats)
    return _result("DFS", termination, stack, stats, budget, max_depth, return_path)


def iddfs(
    start: Board,
    return_path: bool = True,
    timeout_sec: Optional[float] = None,
    max_expansions: Optional[int] = None,
) -> SearchResult:
    """
    Iterative-deepening DFS: depth-limited DFS re-run with limits 0, 1, 2, ...

    The first limit that reaches the goal gives a shortest solution. When an
    iteration finishes without any depth cut-off the whole reachable space
    has been explored and NO_SOLUTION is reported.
    """
    budget = Budget(timeout_sec, max_expansions)
    stats = _fresh_stats()
    for limit in count():
        termination, stack, cut_off = _depth_limited(start, limit, budget, stats)
        if termination is not Termination.NO_SOLUTION or not cut_off:
            return _result("ID-DFS", termination, stack, stats, budget, limit, return_path)
