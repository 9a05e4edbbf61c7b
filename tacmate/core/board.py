"""Board state for 3x3 tic-tac-toe: marks, legality, move application and win detection."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

Coord = Tuple[int, int]

SIZE = 3

# 3 rows, 3 columns, main diagonal, anti-diagonal
WIN_LINES: List[Tuple[Coord, Coord, Coord]] = (
    [((r, 0), (r, 1), (r, 2)) for r in range(SIZE)]
    + [((0, c), (1, c), (2, c)) for c in range(SIZE)]
    + [((0, 0), (1, 1), (2, 2)), ((0, 2), (1, 1), (2, 0))]
)


class Mark(Enum):
    X = "X"
    O = "O"

    def opponent(self) -> "Mark":
        return Mark.O if self is Mark.X else Mark.X

    def __str__(self) -> str:
        return self.value


def opponent(mark: Mark) -> Mark:
    return mark.opponent()


def _empty_fields() -> List[List[Optional[Mark]]]:
    return [[None] * SIZE for _ in range(SIZE)]


_GLYPHS = {"x": Mark.X, "o": Mark.O, ".": None, "_": None, " ": None}


@dataclass
class Board:
    """A 3x3 grid of optional marks plus the side to move.

    Mutated only through ``apply_move``; search code explores hypothetical
    continuations on ``copy()``s so sibling branches never share a grid.
    """

    next_player: Mark = Mark.X
    fields: List[List[Optional[Mark]]] = field(default_factory=_empty_fields)

    @classmethod
    def from_rows(cls, rows: List[str], next_player: Mark = Mark.X) -> "Board":
        """Build a board from three 3-char strings, e.g. ``["_XO", "X_X", "OX_"]``."""
        if len(rows) != SIZE or any(len(row) != SIZE for row in rows):
            raise ValueError(f"Expected {SIZE} rows of {SIZE} cells, got {rows!r}")
        try:
            fields = [[_GLYPHS[ch.lower()] for ch in row] for row in rows]
        except KeyError as e:
            raise ValueError(f"Unknown cell glyph {e.args[0]!r}") from None
        return cls(next_player=next_player, fields=fields)

    def copy(self) -> "Board":
        """Return an independent copy (grid rows are not shared)."""
        return Board(next_player=self.next_player, fields=[row[:] for row in self.fields])

    def is_legal(self, coord: Coord) -> bool:
        """True if ``coord`` is on the board and the target cell is empty."""
        row, col = coord
        if row < 0 or row >= SIZE or col < 0 or col >= SIZE:
            return False
        return self.fields[row][col] is None

    def apply_move(self, coord: Coord):
        """Place ``next_player`` on ``coord`` and pass the turn.

        Callers must check ``is_legal`` first; an illegal target is a
        programming error.
        """
        assert self.is_legal(coord), f"illegal move {coord}"
        row, col = coord
        self.fields[row][col] = self.next_player
        self.next_player = self.next_player.opponent()

    def get_winner(self) -> Optional[Mark]:
        """Return the mark owning a full line, or None.

        X is checked before O; a reachable board never has two winners, so the
        order only matters for hand-built positions.
        """
        for mark in (Mark.X, Mark.O):
            for a, b, c in WIN_LINES:
                if (self.fields[a[0]][a[1]] is mark
                        and self.fields[b[0]][b[1]] is mark
                        and self.fields[c[0]][c[1]] is mark):
                    return mark
        return None

    def is_full(self) -> bool:
        return all(cell is not None for row in self.fields for cell in row)

    def is_ended(self) -> bool:
        return self.get_winner() is not None or self.is_full()

    def empty_cells(self) -> List[Coord]:
        return [(r, c) for r in range(SIZE) for c in range(SIZE) if self.fields[r][c] is None]

    def legal_moves(self) -> List[Coord]:
        """Legal coordinates in row-major order; empty once the game has ended."""
        if self.is_ended():
            return []
        return [coord for coord in self.empty_cells() if self.is_legal(coord)]

    def __str__(self) -> str:
        lines = ["  a b c"]
        for i, row in enumerate(self.fields):
            cells = " ".join("." if cell is None else cell.value.lower() for cell in row)
            lines.append(f"{i + 1} {cells}")
        return "\n".join(lines)


def new_board(first_mover: Mark = Mark.X) -> Board:
    """Empty board with ``first_mover`` to play."""
    return Board(next_player=first_mover)
