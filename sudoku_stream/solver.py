# solver.py

from __future__ import annotations

import logging
from dataclasses import dataclass
from itertools import islice
from typing import Iterator, List, Optional

from .grid import Grid, Pos
from .propagation import propagate

log = logging.getLogger(__name__)


# --------------------------
# Search strategy
# --------------------------


def choose_cell(grid: Grid) -> Optional[Pos]:
    """
    Minimum Remaining Values (MRV) heuristic: the open cell with the fewest
    candidates, ties broken by lowest row then lowest column.
    """
    if not grid.cands:
        return None
    return min(grid.cands, key=lambda p: (len(grid.cands[p]), p))


@dataclass
class SearchStats:
    branches: int = 0        # candidate values tried at branch points
    contradictions: int = 0  # branches that propagated to a dead end
    solutions: int = 0
    max_depth: int = 0


@dataclass
class _Frame:
    grid: Grid
    pos: Pos
    remaining: List[int]  # descending; pop() gives the smallest


# --------------------------
# Lazy depth-first enumeration with an explicit stack
# --------------------------


class SolutionIterator:
    """
    Pull-based sequence of the solutions of one grid.

    The depth-first search lives in an explicit stack of branch frames, so
    each call to ``next()`` resumes from the most recent untried candidate
    and suspends again right after the next solution is found. Memory is
    bounded by the depth of the stack (at most one frame per open cell),
    never by the number of solutions already produced.

    Single use: once exhausted it keeps raising StopIteration. The grid
    passed in is never mutated.
    """

    def __init__(self, grid: Grid) -> None:
        self.stats = SearchStats()
        self._stack: List[_Frame] = []

        # propagated on the first pull
        self._root: Optional[Grid] = grid.copy()
        self._pending: Optional[Grid] = None

    def __iter__(self) -> "SolutionIterator":
        return self

    def __next__(self) -> Grid:
        if self._root is not None:
            root, self._root = self._root, None
            if propagate(root):
                self._pending = root
            else:
                self.stats.contradictions += 1

        while True:
            if self._pending is not None:
                grid, self._pending = self._pending, None
                pos = choose_cell(grid)
                if pos is None:
                    # all cells fixed through legal candidates only
                    self.stats.solutions += 1
                    log.debug(
                        "Solution %d found at depth %d",
                        self.stats.solutions,
                        len(self._stack),
                    )
                    return grid
                self._push(grid, pos)
                continue

            if not self._stack:
                raise StopIteration

            frame = self._stack[-1]
            if not frame.remaining:
                self._stack.pop()
                continue

            v = frame.remaining.pop()
            if frame.remaining:
                child = frame.grid.copy()
            else:
                # last candidate: the frame is done, reuse its grid
                self._stack.pop()
                child = frame.grid

            self.stats.branches += 1
            r, c = frame.pos
            child.fix(r, c, v)
            if propagate(child):
                self._pending = child
            else:
                self.stats.contradictions += 1

    def _push(self, grid: Grid, pos: Pos) -> None:
        r, c = pos
        remaining = sorted(grid.candidates(r, c), reverse=True)
        self._stack.append(_Frame(grid, pos, remaining))
        self.stats.max_depth = max(self.stats.max_depth, len(self._stack))


def solutions(grid: Grid, limit: Optional[int] = 1) -> Iterator[Grid]:
    """
    Lazily enumerate up to ``limit`` solutions of ``grid`` (default: one).
    ``limit=None`` enumerates all of them.
    """
    if limit is None:
        return SolutionIterator(grid)
    if limit < 0:
        raise ValueError(f"Solution limit cannot be negative: {limit}")
    return islice(SolutionIterator(grid), limit)
