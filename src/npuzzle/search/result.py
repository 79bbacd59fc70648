from __future__ import annotations
from dataclasses import dataclass, field
from enum import StrEnum
from time import perf_counter
from typing import List, Optional

from npuzzle.domains.board import Board, Direction


class Termination(StrEnum):
    OK = "ok"
    NO_SOLUTION = "no_solution"
    BUDGET_EXCEEDED = "budget_exceeded"


@dataclass
class Budget:
    """Optional wall-clock and node-expansion limits, polled before each expansion."""
    timeout_sec: Optional[float] = None
    max_expansions: Optional[int] = None
    t0: float = field(default_factory=perf_counter)

    def exceeded(self, expanded: int) -> bool:
        if self.max_expansions is not None and expanded >= self.max_expansions:
            return True
        if self.timeout_sec is not None and (perf_counter() - self.t0) > self.timeout_sec:
            return True
        return False

    def elapsed(self) -> float:
        return perf_counter() - self.t0


@dataclass
class SearchResult:
    """Outcome of one solve plus the counters the experiment runner records.

    ``path`` holds the boards from start to goal inclusive and ``moves`` the
    blank moves between them; both are ``None`` unless the search succeeded
    with ``return_path=True``. ``g`` is the solution length.
    """
    algorithm: str
    termination: Termination
    path: Optional[List[Board]] = None
    moves: Optional[List[Direction]] = None
    g: Optional[int] = None
    expanded: int = 0
    generated: int = 0
    duplicates: int = 0
    time: float = 0.0
    peak_open: Optional[int] = None
    peak_closed: Optional[int] = None
    peak_recursion: Optional[int] = None
    bound_final: Optional[int] = None
    tie_break: Optional[str] = None

    @property
    def solved(self) -> bool:
        return self.termination is Termination.OK
