"""Command line interface for running and administering the user registry."""

from typing import Optional

import typer
import uvicorn
from rich.console import Console

from src.user_registry.runtime.context import get_config
from src.user_registry.runtime.init_db import init_db

from .user_commands import users_app

console = Console()

app = typer.Typer(
    help="User registry service tools",
    no_args_is_help=True,
    rich_markup_mode="rich",
)
app.add_typer(users_app, name="users")


@app.command("serve")
def serve(
    host: Optional[str] = typer.Option(None, help="Host to bind (defaults to config)"),
    port: Optional[int] = typer.Option(None, help="Port to bind (defaults to config)"),
    reload: bool = typer.Option(False, help="Enable auto-reload on code changes"),
) -> None:
    """Run the HTTP API with uvicorn."""
    config = get_config()
    host = host or config.app.host
    port = port or config.app.port

    console.print(f"[blue]Server will be available at:[/blue] http://{host}:{port}")
    uvicorn.run(
        "src.user_registry.api.http.app:app",
        host=host,
        port=port,
        reload=reload,
        log_config=None,  # Logging is routed through Loguru
    )


@app.command("init-db")
def init_db_command() -> None:
    """Create the database tables."""
    init_db()
    console.print("[green]✅ Database tables created[/green]")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
