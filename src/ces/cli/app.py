"""Main CLI application."""

import typer

from ces.cli.commands import reset, run, status

app = typer.Typer(
    name="ces",
    help="ces - delayed survey prompt scheduler",
    no_args_is_help=True,
)

status.register(app)
reset.register(app)
run.register(app)


if __name__ == "__main__":
    app()
