"""
cli.py

Command-line programs around the solver.

- ``sudoku-solve [COUNT]`` reads a puzzle on stdin and prints up to COUNT
  solutions (default 1).
- ``sudoku-format`` reads a puzzle on stdin and prints it in canonical form.

Puzzle text: one character per cell, row by row. ``.`` or ``0`` is an empty
cell, ``1``-``9`` are values, ``A``-``G`` are 10-16 on 16x16 grids. Spaces,
newlines and other punctuation are ignored, e.g.::

    7.9 4.2 8.3
    .5. ... .2.
    ... 653 ...

    1.. 5.7 ..8
    ..7 ... 6..
    89. 1.6 .47

    ..1 .7. 4..
    ..5 ... 7..
    ..4 .8. 3..
"""

import argparse
import logging
import sys
from typing import List, Optional

from cardinal_pythonlib.argparse_func import RawDescriptionArgumentDefaultsHelpFormatter  # noqa
from cardinal_pythonlib.logs import main_only_quicksetup_rootlogger

from .exceptions import SudokuError
from .solver import solutions
from .text import format_grid, parse

log = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


def _solution_count(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise ValueError(f"Solution count must be an integer. Was: {text!r}") from None
    if value < 0:
        raise ValueError(f"Solution count must not be negative. Was: {value}")
    return value


def _make_parser(description: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        formatter_class=RawDescriptionArgumentDefaultsHelpFormatter,
        description=f"{description}\n{__doc__}",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Be verbose (debug logging)")
    return parser


def _setup_logging(verbose: bool) -> None:
    main_only_quicksetup_rootlogger(
        level=logging.DEBUG if verbose else logging.WARNING)


def solve_main(argv: Optional[List[str]] = None) -> int:
    """
    Entry point for ``sudoku-solve``.
    """
    parser = _make_parser("Print solutions of the Sudoku puzzle on stdin.")
    parser.add_argument(
        "count", nargs="?", default="1",
        help="Maximum number of solutions to print")
    args = parser.parse_args(argv)
    _setup_logging(args.verbose)

    try:
        count = _solution_count(args.count)
        grid = parse(sys.stdin.read())
    except (SudokuError, ValueError) as e:
        # ValueError covers UnicodeDecodeError on undecodable input
        log.error("%s", e)
        return EXIT_FAILURE
    log.debug("Solving %dx%d grid with %d clue(s), up to %d solution(s)",
              grid.size, grid.size, len(grid.givens), count)

    found = 0
    for i, solution in enumerate(solutions(grid, count)):
        if i > 0:
            print(f"\n == Solution {i + 1} ==")
        print(format_grid(solution), end="")
        found += 1
    if found == 0 and count > 0:
        log.warning("Puzzle has no solution")
    return EXIT_SUCCESS


def format_main(argv: Optional[List[str]] = None) -> int:
    """
    Entry point for ``sudoku-format``.
    """
    parser = _make_parser("Reformat the Sudoku puzzle on stdin.")
    args = parser.parse_args(argv)
    _setup_logging(args.verbose)

    try:
        grid = parse(sys.stdin.read())
    except (SudokuError, ValueError) as e:
        log.error("%s", e)
        return EXIT_FAILURE
    print(format_grid(grid), end="")
    return EXIT_SUCCESS


def run_solve() -> None:
    sys.exit(solve_main())


def run_format() -> None:
    sys.exit(format_main())
