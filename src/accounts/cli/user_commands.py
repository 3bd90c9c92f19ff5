"""User management CLI commands."""

import typer
from rich.markup import escape
from rich.panel import Panel

from src.accounts.core.errors import AccountsError
from src.accounts.core.services.database.db_session import DbSessionService
from src.accounts.core.services.user.user_management import UserManagementService
from src.accounts.core.validation import validate_full_name
from src.accounts.runtime.startup import configure_logging

from .utils import Stopwatch, ask, console, log_level_for, print_error


def interact(first_name: str | None, last_name: str | None) -> tuple[str, str]:
    """Ask for whichever of the two names was not given on the command line."""
    if first_name is not None and last_name is not None:
        return first_name, last_name

    console.print(
        Panel.fit(
            "[bold green]Add User Command Interactive Wizard[/bold green]",
            border_style="green",
        )
    )
    console.print(
        "If you prefer to not use this interactive wizard, provide the\n"
        "arguments required by this command as follows:\n"
        "\n"
        " $ accounts add-user firstname lastname\n"
        "\n"
        "Now we'll ask you for the value of all the missing command arguments.\n"
    )

    if first_name is not None:
        console.print(f" > [cyan]First name[/cyan]: {escape(first_name)}")
    else:
        first_name = ask("First name", validate_full_name)

    if last_name is not None:
        console.print(f" > [cyan]Last name[/cyan]: {escape(last_name)}")
    else:
        last_name = ask("Last name", validate_full_name)

    return first_name, last_name


def add_user(
    first_name: str | None = typer.Argument(
        None, metavar="FIRST_NAME", help="The first name of the new user"
    ),
    last_name: str | None = typer.Argument(
        None, metavar="LAST_NAME", help="The last name of the new user"
    ),
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase verbosity: -v timing report, -vv info logs, -vvv debug logs",
    ),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only print errors"),
    no_interaction: bool = typer.Option(
        False, "--no-interaction", "-n", help="Do not ask for missing arguments"
    ),
) -> None:
    """
    ➕ Create a user and store it in the database.

    Missing names are asked for interactively:

      accounts add-user             asks for both names

      accounts add-user chuck       asks for the last name only

      accounts add-user chuck norris

    The first name must not be taken by another user.
    """
    configure_logging(log_level_for(verbose, quiet))

    if not no_interaction:
        first_name, last_name = interact(first_name, last_name)

    stopwatch = Stopwatch(track_memory=verbose > 0)
    stopwatch.start()

    db_session_service = DbSessionService()
    try:
        with db_session_service.session_scope() as session:
            user = UserManagementService(session).create_user(first_name, last_name)
    except AccountsError as e:
        print_error(e.message)
        raise typer.Exit(code=1) from e
    finally:
        db_session_service.dispose()

    event = stopwatch.stop()

    if quiet:
        return

    console.print(
        f"[green]✅ User was successfully created: "
        f"{escape(user.first_name)} {escape(user.last_name)}[/green]"
    )

    if verbose > 0:
        console.print(
            f"[dim]New user database id: {user.id} / "
            f"Elapsed time: {event.duration_ms:.2f} ms / "
            f"Consumed memory: {event.memory_mb:.2f} MB[/dim]"
        )
