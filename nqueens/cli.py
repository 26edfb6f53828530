from typing import Optional

import typer
from loguru import logger

from nqueens.exceptions import AllocationError, InvalidBoardSize, InvalidMode
from nqueens.runner import MODE_NAMES, iter_runs, report_lines, validate_size

app = typer.Typer(add_completion=False)

MODE_PROMPT = "\n".join(
    ["Select mode you wish the program to compute N-queens problem:"]
    + [f"({m}) => {MODE_NAMES[m]}" for m in (1, 2, 3, 4, 0)]
    + ["Mode"]
)


@app.command()
def main(
    size: Optional[int] = typer.Option(None, "--size", "-n", help="Board size N (N >= 4)."),
    mode: Optional[int] = typer.Option(
        None, "--mode", "-m",
        help="1 brute force, 2 optimized 1, 3 optimized 2, 4 backtracking, 0 all.",
    ),
):
    """Count N-Queens solutions with one strategy or all four."""
    if size is None:
        size = typer.prompt("Enter size of chess field (N>=4)", type=int)

    # Reject a bad size before asking for the mode or allocating anything
    try:
        validate_size(size)
    except InvalidBoardSize as e:
        logger.warning(str(e))
        typer.echo("Size incorrect!\nExiting...")
        raise typer.Exit(code=1)

    if mode is None:
        mode = typer.prompt(MODE_PROMPT, type=int)

    try:
        for result in iter_runs(size, mode):
            for line in report_lines(result):
                typer.echo(line)
    except InvalidMode:
        logger.warning(f"Unknown mode {mode}")
        typer.echo("Error while choosing mode...")
    except AllocationError as e:
        logger.error(str(e))
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
