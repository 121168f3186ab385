# text.py

import string
from typing import List, Optional

from .grid import Grid


def parse_element(ch: str) -> Optional[int]:
    """
    '.' -> 0, '0'..'9' -> 0..9, 'A'..'Z' -> 10..35, 'a'..'z' -> 36..61.
    Anything else is formatting and returns None.
    """
    if ch == ".":
        return 0
    if ch in string.digits:
        return int(ch)
    if ch in string.ascii_uppercase:
        return int(ch, 36)
    if ch in string.ascii_lowercase:
        return 26 + int(ch, 36)
    return None


def format_element(n: Optional[int]) -> str:
    """Inverse of parse_element; empty cells (0 or None) become '.'."""
    if not n:
        return "."
    if 1 <= n <= 9:
        return str(n)
    if 10 <= n <= 35:
        return string.ascii_uppercase[n - 10]
    if 36 <= n <= 61:
        return string.ascii_lowercase[n - 36]
    raise ValueError(f"don't know how to format {n}")


def parse(content: str) -> Grid:
    """
    Read a grid from text. Every element character is one cell, row by row;
    whitespace and any other punctuation are ignored.
    """
    values: List[int] = []
    for ch in content:
        v = parse_element(ch)
        if v is not None:
            values.append(v)
    return Grid.load(values)


def format_grid(grid: Grid) -> str:
    """
    One line per row, a double space between boxes and an empty line
    between rows of boxes.
    """
    lines: List[str] = []
    box = grid.box_size
    for r, row in enumerate(grid.board):
        if r > 0 and r % box == 0:
            lines.append("")
        chunks = [
            " ".join(format_element(v) for v in row[start: start + box])
            for start in range(0, grid.size, box)
        ]
        lines.append("  ".join(chunks))
    return "".join(line + "\n" for line in lines)
