"""FiqhQA CLI application using Typer.

This module provides command-line utilities for the FiqhQA backend:
running the API server, creating the database schema and generating
deployment secrets.
"""

import asyncio
import secrets
from typing import Optional

import typer
import uvicorn
from rich.console import Console

from fiqhqa.infrastructure.persistence.sqlalchemy import Database
from fiqhqa_config.settings import get_settings

app = typer.Typer(
    name="fiqhqa",
    help="FiqhQA - question-answering backend CLI",
    no_args_is_help=True,
)
console = Console()


secrets_app = typer.Typer(
    name="secrets",
    help="Secret generation utilities",
    no_args_is_help=True,
)
app.add_typer(secrets_app)

db_app = typer.Typer(
    name="db",
    help="Database utilities",
    no_args_is_help=True,
)
app.add_typer(db_app)


@app.command("serve")
def serve(
    host: Optional[str] = typer.Option(None, help="Bind address (default: API_HOST)"),
    port: Optional[int] = typer.Option(None, help="Bind port (default: API_PORT)"),
) -> None:
    """Run the HTTP API server."""
    settings = get_settings()
    host = host or settings.api_host
    port = port or settings.api_port

    console.print(f"API server listening at: [bold]{host}:{port}[/bold]")
    uvicorn.run(
        "fiqhqa.presentation.api.app:create_app",
        factory=True,
        host=host,
        port=port,
        log_config=None,
    )


@db_app.command("init")
def init_db() -> None:
    """Create missing database tables for DATABASE_URL."""
    settings = get_settings()
    database = Database(settings.database_url)

    async def _init() -> None:
        try:
            await database.create_schema()
        finally:
            await database.dispose()

    asyncio.run(_init())
    console.print("[bold green]Database schema is up to date[/bold green]")


@secrets_app.command("generate")
def generate_secrets() -> None:
    """Generate a secure JWT signing secret.

    Copy the output to your .env file.
    """
    console.print("\n[bold green]FiqhQA Secret Generation[/bold green]")
    console.print("=" * 60)

    # 64 bytes is plenty for HS256
    jwt_secret = secrets.token_urlsafe(64)
    console.print(f"[cyan]JWT_SECRET_KEY[/cyan]={jwt_secret}", soft_wrap=True)

    console.print("\n" + "=" * 60)
    console.print(
        "[yellow]Keep this secret secure and never commit it "
        "to version control![/yellow]\n",
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
