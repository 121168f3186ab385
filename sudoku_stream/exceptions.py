# exceptions.py

from typing import Optional, Tuple


class SudokuError(Exception):
    pass


class InvalidSize(SudokuError, ValueError):
    """
    Raised when a clue count (or side length) does not describe a
    supported grid: side N must be a perfect square no larger than 16.
    """

    def __init__(self, count: int, message: Optional[str] = None) -> None:
        self.count = count
        super().__init__(
            message
            or f"Invalid input, length must be a perfect square of a "
            f"perfect square (at most 256). Was: {count}"
        )


class InvalidClue(SudokuError, ValueError):
    """
    Raised when a given clue is out of range or repeats a value already
    given in the same row, column or box.
    """

    def __init__(self, pos: Tuple[int, int], value: object, reason: str) -> None:
        self.pos = pos
        self.value = value
        r, c = pos
        super().__init__(f"Invalid clue {value!r} at ({r + 1},{c + 1}): {reason}")
