from loguru import logger

from nqueens.exceptions import AllocationError
from nqueens.strategy import Strategy


class PositionList:
    """
    One [row, col] entry per row. Entry i always holds row i; only the
    columns move, read as a base-n counter with the last row as the
    least significant digit.
    """

    def __init__(self, n: int, seed=None):
        """
        Args:
            n (int): Board size.
            seed (list[int]): Starting column for each row. All zeros if omitted.
        """
        if seed is None:
            seed = [0] * n
        if len(seed) != n:
            raise ValueError(f"seed has {len(seed)} columns, expected {n}")
        self.n = n
        try:
            self.entries = [[row, col] for row, col in enumerate(seed)]
        except MemoryError as e:
            raise AllocationError(n, what="positions array") from e

    def columns(self) -> tuple:
        return tuple(entry[1] for entry in self.entries)

    def __getitem__(self, i):
        return self.entries[i]

    def __len__(self):
        return self.n

    def __iter__(self):
        return iter(self.entries)

    def __repr__(self):
        return f"PositionList({list(self.columns())})"


def is_valid_solution(n: int, positions) -> bool:
    """
    Check a full arrangement for column and diagonal conflicts.

    Every unordered pair of entries is compared, so the order of the
    entries never changes the verdict.

    Args:
        n (int): Board size.
        positions: n (row, col) pairs.

    Returns:
        bool: True if no two queens attack each other.
    """
    for i in range(n):
        row_i, col_i = positions[i][0], positions[i][1]
        for j in range(i + 1, n):
            row_j, col_j = positions[j][0], positions[j][1]
            if col_i == col_j or abs(row_i - row_j) == abs(col_i - col_j):
                return False
    return True


def next_combination(positions) -> bool:
    """
    Advance the column counter by one, carrying from the last row upward.

    Args:
        positions: [row, col] entries, mutated in place.

    Returns:
        bool: False once every column has wrapped back to 0, True otherwise.
    """
    n = len(positions)
    i = n - 1

    while i >= 0 and positions[i][1] == n - 1:
        positions[i][1] = 0
        i -= 1

    if i < 0:
        return False

    positions[i][1] += 1
    return True


class ExhaustiveEnumerator(Strategy):
    """
    Generate-and-test over the odometer, starting from seed(n) and
    running until it wraps.
    """

    def seed(self, n: int) -> list:
        return [0] * n

    def count_solutions(self, n: int) -> int:
        positions = PositionList(n, self.seed(n))
        logger.debug(f"{self.label}: enumerating from {positions!r}")

        solutions = 0
        candidates = 0
        while True:
            candidates += 1
            if is_valid_solution(n, positions):
                solutions += 1
            if not next_combination(positions):
                break

        self.candidates = candidates
        return solutions


class BruteForce(ExhaustiveEnumerator):
    """Every queen starts in column 0."""

    mode = 1
    label = "Brute Force"


class OptimizedOne(ExhaustiveEnumerator):
    """Same seed as brute force; one queen per row is already built into the entries."""

    mode = 2
    label = "Optimized 1"


class OptimizedTwo(ExhaustiveEnumerator):
    """Queen i starts in column i, so the seed has no shared row or column."""

    mode = 3
    label = "Optimized 2"

    def seed(self, n: int) -> list:
        return list(range(n))
