"""Database schema CLI commands."""

import typer

from src.accounts.core.services.database.db_manage import DbManageService
from src.accounts.runtime.startup import configure_logging

from .utils import console

db_app = typer.Typer(help="🗄️  Database schema commands")


@db_app.callback()
def db_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show migration logs"),
) -> None:
    """Run Alembic migrations against the configured database."""
    configure_logging("INFO" if verbose else None)


@db_app.command("upgrade")
def upgrade(
    revision: str = typer.Argument("head", help="Target revision"),
) -> None:
    """⬆️  Apply migrations up to a revision."""
    DbManageService().upgrade(revision)
    console.print(f"[green]✅ Database upgraded to {revision}[/green]")


@db_app.command("downgrade")
def downgrade(
    revision: str = typer.Argument("-1", help="Target revision"),
) -> None:
    """⬇️  Revert migrations down to a revision."""
    DbManageService().downgrade(revision)
    console.print(f"[green]✅ Database downgraded to {revision}[/green]")


@db_app.command("current")
def current() -> None:
    """Show the revision the database is at."""
    revision = DbManageService().current()
    if revision is None:
        console.print("[yellow]Database is not under migration control[/yellow]")
    else:
        console.print(f"[blue]Current revision:[/blue] {revision}")
