from collections import deque
from typing import Dict, Optional, Set, Tuple

from npuzzle.domains.board import Board, Direction
from npuzzle.search.result import Budget, SearchResult, Termination


def bfs(start: Board, return_path: bool = True,
        timeout_sec: Optional[float] = None,
        max_expansions: Optional[int] = None) -> SearchResult:
    budget = Budget(timeout_sec, max_expansions)
    q = deque([start])
    parent: Dict[Board, Optional[Tuple[Board, Direction]]] = {start: None}
    expanded = generated = duplicates = 0
    seen: Set[Board] = {start}
    peak = 1

    def finish(termination, goal=None):
        res = SearchResult(algorithm="BFS", termination=termination,
                           expanded=expanded, generated=generated, duplicates=duplicates,
                           peak_open=peak, peak_closed=len(seen), time=budget.elapsed())
        if goal is not None:
            # reconstruct
            boards, moves = [goal], []
            link = parent[goal]
            while link is not None:
                b, m = link
                boards.append(b); moves.append(m)
                link = parent[b]
            res.g = len(moves)
            if return_path:
                res.path, res.moves = boards[::-1], moves[::-1]
        return res

    while q:
        peak = max(peak, len(q))
        b = q.popleft()
        if b.is_goal():
            return finish(Termination.OK, b)
        if budget.exceeded(expanded):
            return finish(Termination.BUDGET_EXCEEDED)
        expanded += 1
        for m, b2 in b.successors():
            generated += 1
            if b2 in seen:
                duplicates += 1
                continue
            seen.add(b2); parent[b2] = (b, m); q.append(b2)
    return finish(Termination.NO_SOLUTION)
