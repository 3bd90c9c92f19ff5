"""Main CLI application module."""

import typer

from .db_commands import db_app
from .user_commands import add_user

app = typer.Typer(
    help="👥 Accounts CLI - create users and manage the accounts database",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.command("add-user")(add_user)
app.add_typer(db_app, name="db")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
