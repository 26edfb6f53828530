from loguru import logger

from nqueens.helpers.Board import Board
from nqueens.strategy import Strategy


def is_safe(board: Board, n: int, row: int, col: int) -> bool:
    """
    Check whether a queen can go at (row, col) given the queens in columns 0..col-1.

    Conflicts checked:
      - same row
      - up-left diagonal
      - down-left diagonal

    Columns col and beyond are never read, so the board may hold anything there.

    Args:
        board (Board): Current placements.
        n (int): Board dimension.
        row (int): Candidate row.
        col (int): Candidate column.

    Returns:
        bool: True if no earlier queen attacks (row, col).

    Examples:
        >>> board = Board(4)
        >>> board.place(0, 0)
        >>> is_safe(board, 4, 1, 1)
        False
        >>> is_safe(board, 4, 2, 1)
        True
    """
    for c in range(col):
        if board.is_occupied(row, c):
            return False

    r, c = row - 1, col - 1
    while r >= 0 and c >= 0:
        if board.is_occupied(r, c):
            return False
        r, c = r - 1, c - 1

    r, c = row + 1, col - 1
    while r < n and c >= 0:
        if board.is_occupied(r, c):
            return False
        r, c = r + 1, c - 1

    return True


class Queens:
    def __init__(self, n: int, board: Board = None):
        """
        Initialize an n-Queens solution counter.

        Args:
            n (int): Board dimension (n x n).
            board (Board): Board to search on. A fresh one is allocated if omitted.
        """
        if board is not None and board.n != n:
            raise ValueError(f"board is {board.n}x{board.n}, expected {n}x{n}")
        self.n = n
        self.board = board if board is not None else Board(n)
        self.solutions = 0
        self.probes = 0

    def is_safe(self, row: int, col: int) -> bool:
        self.probes += 1
        return is_safe(self.board, self.n, row, col)

    def count_solutions(self) -> int:
        """
        Count every solution to the n-Queens puzzle.

        The board is empty again when this returns.

        Returns:
            int: Number of solutions.

        Examples:
            >>> Queens(4).count_solutions()
            2
            >>> Queens(8).count_solutions()
            92
        """
        self.solutions = 0
        self.probes = 0
        self.search_all(0)
        return self.solutions

    def search_all(self, current_col: int = 0):
        """
        Recursive backtracking helper counting solutions.

        Recursion goes one level per column, so n must stay well below
        the interpreter recursion limit. Use count_solutions_iterative()
        for larger boards.

        Args:
            current_col (int): Current column being filled.
        """
        # Base case: all columns filled, one full solution found
        if current_col == self.n:
            self.solutions += 1
            return

        # Try placing a queen in each row of this column
        for row in range(self.n):
            if self.is_safe(row, current_col):
                self.board.place(row, current_col)
                self.search_all(current_col + 1)
                # Backtrack
                self.board.remove(row, current_col)

    def count_solutions_iterative(self) -> int:
        """
        Same search as count_solutions() driven by an explicit stack of
        [column, next row to try] frames instead of recursion.

        Examples:
            >>> Queens(6).count_solutions_iterative()
            4
        """
        self.solutions = 0
        self.probes = 0
        stack = [[0, 0]]

        while stack:
            frame = stack[-1]
            col = frame[0]

            if col == self.n:
                self.solutions += 1
                stack.pop()
                self._undo_parent(stack)
                continue

            row = frame[1]
            while row < self.n and not self.is_safe(row, col):
                row += 1

            if row < self.n:
                frame[1] = row + 1
                self.board.place(row, col)
                stack.append([col + 1, 0])
            else:
                stack.pop()
                self._undo_parent(stack)

        return self.solutions

    def _undo_parent(self, stack):
        # The parent frame's queen sits one row above its next row to try
        if stack:
            col, next_row = stack[-1]
            self.board.remove(next_row - 1, col)

    def __str__(self) -> str:
        """Return a summary of how many solutions exist for this n."""
        return f"{self.n}-Queens has {self.count_solutions()} solutions"


class Backtracking(Strategy):
    """Recursive column-by-column placement with pruning."""

    mode = 4
    label = "Backtracking"

    def __init__(self, board: Board = None):
        super().__init__()
        self.board = board

    def count_solutions(self, n: int) -> int:
        queens = Queens(n, self.board)
        logger.debug(f"Backtracking search on {queens.board!r}")
        count = queens.count_solutions()
        self.candidates = queens.probes
        return count


if __name__ == "__main__":
    queens = Queens(8)
    print(queens)
