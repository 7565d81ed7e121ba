"""Postboard CLI application using Typer.

This module provides command-line utilities for the Postboard backend,
including secret generation for deployment configuration and database
schema setup.
"""

import asyncio
import secrets

import typer
import uvicorn
from rich.console import Console

from postboard.infrastructure.persistence.sqlalchemy.engine import create_engine
from postboard.presentation.api.dependencies import create_tables
from postboard_config.settings import get_settings

app = typer.Typer(
    name="postboard",
    help="Postboard - users and blog posts backend CLI",
    no_args_is_help=True,
)
console = Console()


# Create secrets subcommand group
secrets_app = typer.Typer(
    name="secrets",
    help="Secret generation utilities",
    no_args_is_help=True,
)
app.add_typer(secrets_app)

# Create db subcommand group
db_app = typer.Typer(
    name="db",
    help="Database schema utilities",
    no_args_is_help=True,
)
app.add_typer(db_app)


@secrets_app.command("generate")
def generate_secrets() -> None:
    """Generate secure secrets for Postboard configuration.

    Generates two required secrets:
    - JWT_SECRET_KEY: Secret for signing JWT authentication tokens
    - POSTGRES_PASSWORD: Database password

    Copy the output to your .env file.
    """
    console.print("\n[bold green]Postboard Secret Generation[/bold green]")
    console.print("=" * 60)
    console.print(
        "\nGenerated secrets for your [bold].env[/bold] configuration file:\n"
    )

    # 64 random bytes for HS256 signing
    jwt_secret = secrets.token_urlsafe(64)
    console.print(f"[cyan]JWT_SECRET_KEY[/cyan]={jwt_secret}")

    db_password = secrets.token_urlsafe(32)
    console.print(f"[cyan]POSTGRES_PASSWORD[/cyan]={db_password}")

    console.print("\n" + "=" * 60)
    console.print(
        "[yellow]Keep these secrets secure and never commit them "
        "to version control![/yellow]"
    )
    console.print(
        "[dim]Copy the above values to your config/.env (Docker) or "
        "config/.env.dev (local) file.[/dim]\n"
    )


async def _init_database(database_url: str) -> None:
    engine = create_engine(database_url)
    try:
        await create_tables(engine)
    finally:
        await engine.dispose()


@db_app.command("init")
def init_database() -> None:
    """Create any missing database tables.

    Existing tables and their rows are left untouched.
    """
    settings = get_settings()
    console.print("Creating missing tables...")
    try:
        asyncio.run(_init_database(settings.database_url))
    except OSError as e:
        console.print(f"[red]Could not connect to the database: {e}[/red]")
        raise typer.Exit(1) from e
    console.print("[green]Database schema is up to date.[/green]")


@app.command("serve")
def serve(
    reload: bool = typer.Option(False, help="Reload on source changes"),
) -> None:
    """Run the API server with the configured host and port."""
    settings = get_settings()
    uvicorn.run(
        "postboard.presentation.api.app:create_app",
        factory=True,
        host=settings.api_host,
        port=settings.api_port,
        reload=reload,
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
