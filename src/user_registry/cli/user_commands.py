"""Read-only user inspection commands."""

from datetime import datetime

import typer
from rich.console import Console
from rich.table import Table

from src.user_registry.core.exceptions import UserServiceError
from src.user_registry.core.services import DbSessionService, SystemClock, UserService
from src.user_registry.entities.user import User, UserRepository
from src.user_registry.runtime.context import get_config

console = Console()

users_app = typer.Typer(help="Inspect stored users")


def _render(users: list[User], title: str) -> None:
    if not users:
        console.print("[yellow]No users found[/yellow]")
        return

    table = Table(title=title)
    table.add_column("ID", style="cyan")
    table.add_column("Email", style="blue")
    table.add_column("First Name", style="magenta")
    table.add_column("Last Name", style="magenta")
    table.add_column("Birth Date", style="green")
    table.add_column("Address")
    table.add_column("Phone")

    for user in users:
        table.add_row(
            str(user.id),
            user.email or "",
            user.first_name or "",
            user.last_name or "",
            user.birth_date.isoformat() if user.birth_date else "",
            user.address or "",
            user.phone_number or "",
        )

    console.print(table)
    console.print(f"\n[green]Found {len(users)} users[/green]")


def _run(action) -> list[User]:
    """Run action against a UserService bound to a fresh session."""
    database_service = DbSessionService()
    try:
        with database_service.session_scope() as session:
            service = UserService(
                UserRepository(session),
                min_age=get_config().users.min_age,
                clock=SystemClock(),
            )
            return action(service)
    finally:
        database_service.dispose()


@users_app.command("list")
def list_users() -> None:
    """List every stored user."""
    _render(_run(lambda service: service.list_all()), "Users")


@users_app.command("search")
def search_users(
    start: datetime = typer.Option(..., "--from", formats=["%Y-%m-%d"], help="Earliest birth date"),
    end: datetime = typer.Option(..., "--to", formats=["%Y-%m-%d"], help="Latest birth date"),
) -> None:
    """List users born within an inclusive date range."""
    try:
        users = _run(
            lambda service: service.search_by_birth_date(start.date(), end.date())
        )
    except UserServiceError as e:
        console.print(f"[red]❌ {e.message}[/red]")
        raise typer.Exit(code=1) from e

    _render(users, f"Users born {start.date()} to {end.date()}")
