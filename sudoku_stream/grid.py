# grid.py

from __future__ import annotations

import copy
import math
from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, FrozenSet, List, Optional, Sequence, Set, Tuple, Union

from .exceptions import InvalidClue, InvalidSize

MAX_SIZE = 16

Value = Optional[int]
Board = List[List[Value]]
Pos = Tuple[int, int]


@dataclass(frozen=True)
class Fixed:
    value: int


@dataclass(frozen=True)
class Open:
    candidates: FrozenSet[int]


Cell = Union[Fixed, Open]


def box_size_for(size: int) -> int:
    """Return sqrt(size), raising InvalidSize unless size is a supported side."""
    box = math.isqrt(size) if size >= 0 else -1
    if size < 0 or size > MAX_SIZE or box * box != size:
        raise InvalidSize(
            size,
            f"Grid side must be a perfect square between 0 and {MAX_SIZE}. "
            f"Was: {size}",
        )
    return box


@lru_cache(maxsize=None)
def _layout(size: int) -> Tuple[Tuple[Tuple[Pos, ...], ...], Dict[Pos, FrozenSet[Pos]]]:
    """
    Units (rows, cols, boxes) and the peers of every cell for a given side.
    Two cells are peers if they appear in the same unit.
    """
    box = box_size_for(size)
    units: List[Tuple[Pos, ...]] = []

    # Rows
    for r in range(size):
        units.append(tuple((r, c) for c in range(size)))

    # Cols
    for c in range(size):
        units.append(tuple((r, c) for r in range(size)))

    # Boxes
    if box:
        for br in range(0, size, box):
            for bc in range(0, size, box):
                units.append(
                    tuple(
                        (br + dr, bc + dc)
                        for dr in range(box)
                        for dc in range(box)
                    )
                )

    peers: Dict[Pos, Set[Pos]] = {
        (r, c): set() for r in range(size) for c in range(size)
    }
    for unit in units:
        for p1 in unit:
            for p2 in unit:
                if p1 != p2:
                    peers[p1].add(p2)

    return tuple(units), {pos: frozenset(nbs) for pos, nbs in peers.items()}


class Grid:
    """
    An N x N Sudoku board with boxes of size sqrt(N) x sqrt(N).

    Fixed cells hold a value in 1..N on the board; open cells hold None on
    the board and own a candidate set in ``cands``. The candidate set of an
    open cell is always {1..N} minus the values fixed among its peers;
    fix() keeps that true by removing a placed value from every peer.
    """

    def __init__(self, size: int = 9) -> None:
        self.box_size = box_size_for(size)
        self.size = size
        self.board: Board = [[None] * size for _ in range(size)]
        self.givens: FrozenSet[Pos] = frozenset()

        all_vals = set(range(1, size + 1))
        self.cands: Dict[Pos, Set[int]] = {
            (r, c): set(all_vals) for r in range(size) for c in range(size)
        }

    @classmethod
    def load(cls, values: Sequence[Value]) -> "Grid":
        """
        Build a grid from N*N clues in row-major order; None or 0 means empty.

        Raises InvalidSize if the count is not the square of a supported
        side, and InvalidClue if a clue is out of range or clashes with an
        earlier clue in the same unit.
        """
        count = len(values)
        size = math.isqrt(count)
        if size * size != count:
            raise InvalidSize(count)
        try:
            grid = cls(size)
        except InvalidSize:
            raise InvalidSize(count) from None

        givens = set()
        for i, v in enumerate(values):
            if v is None:
                continue
            pos = divmod(i, size)
            if isinstance(v, bool) or not isinstance(v, int):
                raise InvalidClue(pos, v, "not an integer")
            if v == 0:
                continue
            if not 1 <= v <= size:
                raise InvalidClue(pos, v, f"allowed values are 1..{size}")
            if v not in grid.cands[pos]:
                raise InvalidClue(
                    pos, v, "value appears twice in a row/column/box"
                )
            grid.fix(pos[0], pos[1], v)
            givens.add(pos)

        grid.givens = frozenset(givens)
        return grid

    # --------------------------
    # Cells
    # --------------------------

    def cell(self, row: int, col: int) -> Cell:
        v = self.board[row][col]
        if v is not None:
            return Fixed(v)
        return Open(frozenset(self.cands[(row, col)]))

    def value(self, row: int, col: int) -> Value:
        return self.board[row][col]

    def candidates(self, row: int, col: int) -> FrozenSet[int]:
        """
        Values still possible for an open cell: {1..N} minus the values
        fixed in its row, column and box.
        """
        if self.board[row][col] is not None:
            raise ValueError(f"Cell ({row},{col}) is already fixed")
        return frozenset(self.cands[(row, col)])

    def fix(self, row: int, col: int, value: int) -> None:
        """
        Place value in an open cell and remove it from the candidates of
        every peer (forward checking).
        """
        pos = (row, col)
        if self.board[row][col] is not None:
            raise ValueError(f"Cell {pos} is already fixed")
        if value not in self.cands[pos]:
            raise ValueError(f"{value} is not a candidate for cell {pos}")

        self.board[row][col] = value
        del self.cands[pos]
        for nb in self.peers(pos):
            nb_cands = self.cands.get(nb)
            if nb_cands is not None:
                nb_cands.discard(value)

    def open_cells(self) -> List[Pos]:
        """Open positions in row-major order."""
        return sorted(self.cands)

    # --------------------------
    # Structure
    # --------------------------

    def units(self) -> Tuple[Tuple[Pos, ...], ...]:
        """All rows, columns and boxes (each must contain 1..N)."""
        return _layout(self.size)[0]

    def peers(self, pos: Pos) -> FrozenSet[Pos]:
        return _layout(self.size)[1][pos]

    # --------------------------
    # Status
    # --------------------------

    def is_solved(self) -> bool:
        if self.cands:
            return False
        return all(self._check_unit(unit) for unit in self.units())

    def is_contradictory(self) -> bool:
        if any(not c for c in self.cands.values()):
            return True
        return not all(self._check_unit(unit) for unit in self.units())

    def _check_unit(self, positions: Sequence[Pos]) -> bool:
        """Helper: ensure no duplicate values in a given unit."""
        seen = set()
        for r, c in positions:
            v = self.board[r][c]
            if v is None:
                continue
            if v in seen:
                return False
            seen.add(v)
        return True

    # --------------------------
    # Copies / conversions
    # --------------------------

    def values(self) -> List[Value]:
        """Flat row-major list of cell values, None for open cells."""
        return [v for row in self.board for v in row]

    def board_copy(self) -> Board:
        return [row[:] for row in self.board]

    def copy(self) -> "Grid":
        clone = copy.copy(self)
        clone.board = self.board_copy()
        clone.cands = {pos: set(c) for pos, c in self.cands.items()}
        return clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.size == other.size and self.board == other.board

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Grid(size={self.size}, open={len(self.cands)})"

    def __str__(self) -> str:
        return "\n".join(" ".join(str(v or ".") for v in row) for row in self.board)
