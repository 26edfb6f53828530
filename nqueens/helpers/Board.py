from loguru import logger

from nqueens.exceptions import AllocationError


class Board:
    """
    Square chess board tracking queen placements for the backtracking search.
    Cells live in one flat list of n*n ints, indexed row * n + col.
    """

    def __init__(self, n: int):
        """
        Allocate an n x n board with every cell unoccupied.

        Args:
            n (int): Board size (n x n).

        Raises:
            AllocationError: if the cells cannot be allocated.
        """
        if n < 1:
            raise ValueError(f"board size must be positive, got {n}")
        self.n = n
        try:
            self.__cells = [0] * (n * n)
        except (MemoryError, OverflowError) as e:
            logger.error(f"Could not allocate a {n}x{n} board: {e!r}")
            raise AllocationError(n) from e

    @property
    def cells(self) -> tuple:
        """
        Snapshot of the board cells.

        Returns:
            tuple[int]: Flattened n*n cells, 1 where a queen sits.
        """
        return tuple(self.__cells)

    def reset(self):
        """Clear every cell in place so the next strategy starts from an empty board."""
        cells = self.__cells
        for i in range(len(cells)):
            cells[i] = 0

    def place(self, row: int, col: int):
        self.__cells[row * self.n + col] = 1

    def remove(self, row: int, col: int):
        self.__cells[row * self.n + col] = 0

    def is_occupied(self, row: int, col: int) -> bool:
        return self.__cells[row * self.n + col] == 1

    def queens(self) -> int:
        """Number of queens currently on the board."""
        return sum(self.__cells)

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return self.n == other.n and self.__cells == other.__cells

    def __repr__(self):
        return f"Board(n={self.n}, queens={self.queens()})"

    def __str__(self):
        """
        Return a printable version of the board.

        'Q' marks queens; '.' marks empty squares.
        """
        rows = []
        for r in range(self.n):
            start = r * self.n
            rows.append("".join("Q" if c else "." for c in self.__cells[start:start + self.n]))
        return "\n".join(rows)
