"""
Board Representation

This module defines the immutable board value used by every other component,
plus the conversions the engine needs at its edges.

Cell Encoding:
    Cell.EMPTY = 0
    Cell.BLACK = 1
    Cell.WHITE = -1

Board Orientation:
    - Row 0 is the top row, row 7 the bottom row
    - Column 0 is the a-file, column 7 the h-file
    - Square names are column letter + (row + 1), so (2, 3) is "d3"
"""

from enum import IntEnum
from typing import Dict, Iterable, Iterator, Optional, Tuple

import numpy as np

BOARD_SIZE = 8
NUM_SQUARES = BOARD_SIZE * BOARD_SIZE

# (d_row, d_col) compass offsets used for capture scanning
DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, 1),
    (1, 1),
    (1, 0),
    (1, -1),
    (0, -1),
)

CORNERS: Tuple[Tuple[int, int], ...] = ((0, 0), (0, 7), (7, 0), (7, 7))

Move = Tuple[int, int]


class Cell(IntEnum):
    """State of a single board cell."""

    EMPTY = 0
    BLACK = 1
    WHITE = -1


class Side(IntEnum):
    """One of the two players. Black moves first."""

    BLACK = 1
    WHITE = -1

    @property
    def cell(self) -> Cell:
        """Cell value occupied by this side's pieces."""
        return Cell(int(self))

    @property
    def label(self) -> str:
        return self.name.lower()


def opposite(side: Side) -> Side:
    """Return the other side."""
    return Side.WHITE if side == Side.BLACK else Side.BLACK


def is_valid_position(row: int, col: int) -> bool:
    """True if (row, col) lies on the 8x8 board."""
    return 0 <= row <= 7 and 0 <= col <= 7


class BoardState:
    """
    Immutable 8x8 grid of cells, stored row-major.

    Operations that "modify" a board return a new BoardState, so search
    branches can share boards freely.

    Attributes:
        cells: Tuple of 64 Cell values, index = row * 8 + col
    """

    __slots__ = ("_cells", "_array")

    def __init__(self, cells: Iterable[Cell]):
        """
        Create a board from 64 row-major cells.

        Raises:
            ValueError: If the cell count is not 64
        """
        cells = tuple(Cell(cell) for cell in cells)
        if len(cells) != NUM_SQUARES:
            raise ValueError(
                f"Board must have {NUM_SQUARES} cells, got {len(cells)}"
            )
        self._cells = cells
        self._array: Optional[np.ndarray] = None

    @classmethod
    def empty(cls) -> "BoardState":
        return cls([Cell.EMPTY] * NUM_SQUARES)

    @property
    def cells(self) -> Tuple[Cell, ...]:
        return self._cells

    def __getitem__(self, position: Move) -> Cell:
        row, col = position
        return self._cells[row * BOARD_SIZE + col]

    def rows(self) -> Iterator[Tuple[Cell, ...]]:
        for row in range(BOARD_SIZE):
            start = row * BOARD_SIZE
            yield self._cells[start:start + BOARD_SIZE]

    def replace(self, updates: Dict[Move, Cell]) -> "BoardState":
        """Return a new board with the given cells overwritten."""
        cells = list(self._cells)
        for (row, col), cell in updates.items():
            cells[row * BOARD_SIZE + col] = cell
        return BoardState(cells)

    def as_array(self) -> np.ndarray:
        """
        Read-only int8 view of the board, shape (8, 8).

        The array is built once per board and cached.
        """
        if self._array is None:
            array = np.array(self._cells, dtype=np.int8).reshape(
                BOARD_SIZE, BOARD_SIZE
            )
            array.flags.writeable = False
            self._array = array
        return self._array

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoardState):
            return NotImplemented
        return self._cells == other._cells

    def __hash__(self) -> int:
        return hash(self._cells)

    def __repr__(self) -> str:
        return f"BoardState('{encode_board(self)}')"


def initial_state() -> BoardState:
    """
    Standard Othello opening position.

    The NW-SE diagonal center cells (3,3) and (4,4) are White, the NE-SW
    diagonal cells (3,4) and (4,3) are Black; all other cells are empty.
    """
    return BoardState.empty().replace({
        (3, 3): Cell.WHITE,
        (4, 4): Cell.WHITE,
        (3, 4): Cell.BLACK,
        (4, 3): Cell.BLACK,
    })


# ============================================================================
# Square Notation
# ============================================================================

FILES = "abcdefgh"


def square_name(row: int, col: int) -> str:
    """
    Convert (row, col) coordinates to an algebraic square name.

    Args:
        row: Row index (0-7)
        col: Column index (0-7)

    Returns:
        Square name, e.g. "d3" for (2, 3)

    Raises:
        ValueError: If the coordinates are off the board
    """
    if not is_valid_position(row, col):
        raise ValueError(f"Position ({row}, {col}) is off the board")
    return f"{FILES[col]}{row + 1}"


def parse_square(name: str) -> Move:
    """
    Convert an algebraic square name to (row, col) coordinates.

    Args:
        name: Square name such as "d3" (case-insensitive)

    Returns:
        Tuple of (row, col)

    Raises:
        ValueError: If the name is malformed or off the board
    """
    text = name.strip().lower()
    if len(text) != 2 or text[0] not in FILES or not text[1].isdigit():
        raise ValueError(f"Invalid square name: {name!r}")

    row = int(text[1]) - 1
    col = FILES.index(text[0])
    if not is_valid_position(row, col):
        raise ValueError(f"Invalid square name: {name!r}")
    return row, col


# ============================================================================
# String Codec
# ============================================================================
# One character per cell, row-major: 'b' black, 'w' white, 'e' empty.

CELL_TO_CHAR = {Cell.BLACK: "b", Cell.WHITE: "w", Cell.EMPTY: "e"}
CHAR_TO_CELL = {"b": Cell.BLACK, "w": Cell.WHITE, "e": Cell.EMPTY, ".": Cell.EMPTY}


def encode_board(state: BoardState) -> str:
    """Encode a board as a 64-character string."""
    return "".join(CELL_TO_CHAR[cell] for cell in state.cells)


def decode_board(text: str) -> BoardState:
    """
    Decode a board from its string form.

    Whitespace and '/' row separators are ignored, and '.' is accepted
    for an empty cell.

    Raises:
        ValueError: On an unknown character or a wrong cell count
    """
    chars = [ch for ch in text.lower() if not ch.isspace() and ch != "/"]

    if len(chars) != NUM_SQUARES:
        raise ValueError(
            f"Board string must describe {NUM_SQUARES} cells, got {len(chars)}"
        )

    cells = []
    for ch in chars:
        if ch not in CHAR_TO_CELL:
            raise ValueError(f"Unknown cell character: {ch!r}")
        cells.append(CHAR_TO_CELL[ch])
    return BoardState(cells)
