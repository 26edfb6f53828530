from nqueens.enumerators import (
    BruteForce,
    OptimizedOne,
    OptimizedTwo,
    PositionList,
    is_valid_solution,
    next_combination,
)
from nqueens.helpers.Board import Board
from nqueens.queens import Backtracking, Queens, is_safe
from nqueens.runner import run_modes

__version__ = "0.1.0"
