# propagation.py

import logging

from .grid import Grid

log = logging.getLogger(__name__)


def propagate(grid: Grid) -> bool:
    """
    Fix naked singles in place until a full pass fixes nothing new.

    Every pass walks the open cells in row-major order. A cell whose
    candidate set is a singleton is fixed at once, so cells later in the
    same pass already see the new value. Returns False as soon as an open
    cell is left with no candidates (the grid is contradictory), True once
    the fixed point is reached.

    Only values that are already candidates are ever fixed and nothing is
    unfixed, so the total number of candidates shrinks on every productive
    pass and the loop ends after at most N*N + 1 passes.
    """
    passes = 0
    fixed = 0
    progress = True
    while progress:
        progress = False
        passes += 1
        for r, c in grid.open_cells():
            if grid.value(r, c) is not None:
                # fixed earlier in this pass
                continue
            cands = grid.candidates(r, c)
            if not cands:
                log.debug(
                    "Contradiction at (%d,%d) after %d pass(es)", r, c, passes
                )
                return False
            if len(cands) == 1:
                (v,) = cands
                grid.fix(r, c, v)
                fixed += 1
                progress = True

    log.debug("Propagation fixed %d cell(s) in %d pass(es)", fixed, passes)
    return True
