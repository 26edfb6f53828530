import os
import sys

from dotenv import load_dotenv
from loguru import logger
from tqdm import tqdm

# Load environment variables from .env file if it exists
load_dotenv()

TITLE = "N-Queens Solution Counter"

MIN_BOARD_SIZE = 4

LOG_LEVEL = os.environ.get("NQUEENS_LOG_LEVEL", "INFO").upper()

# ----- HTTP service limits -----
# Exhaustive modes visit N^N arrangements, backtracking recurses N deep.
MAX_EXHAUSTIVE_SIZE = int(os.environ.get("NQUEENS_MAX_EXHAUSTIVE_SIZE", 7))
MAX_BOARD_SIZE = int(os.environ.get("NQUEENS_MAX_BOARD_SIZE", 13))

PORT = int(os.environ.get("PORT", 8080))
DEBUG = os.environ.get("FLASK_DEBUG", "0") in ("1", "true", "True")

# Route loguru through tqdm.write so log lines don't break progress output
# https://github.com/Delgan/loguru/issues/135
logger.remove()
logger.add(
    lambda msg: tqdm.write(msg, end="", file=sys.stderr),
    colorize=True,
    level=LOG_LEVEL,
)
