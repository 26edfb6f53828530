from dataclasses import dataclass


class Strategy:
    """
    A way of counting N-Queens solutions.

    Subclasses implement count_solutions(n) and may report how many
    candidates they examined through `candidates` once a run finishes.
    """

    mode = None
    label = ""

    def __init__(self):
        self.candidates = 0

    def count_solutions(self, n: int) -> int:
        raise NotImplementedError

    def __repr__(self):
        return f"{type(self).__name__}(mode={self.mode})"


@dataclass
class RunResult:
    mode: int
    label: str
    board_size: int
    solutions: int
    elapsed: float
    candidates: int = 0

    def to_dict(self) -> dict:
        return {
            "mode": self.mode,
            "strategy": self.label,
            "solutions": self.solutions,
            "elapsed": self.elapsed,
            "candidates": self.candidates,
        }
