from nqueens.cli import app

app(prog_name="nqueens")
