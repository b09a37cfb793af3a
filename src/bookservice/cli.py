"""Command-line interface for running and preparing the book service."""

import os
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from src.bookservice.core.errors import ConflictError
from src.bookservice.core.security import Principal, RequiredClaim
from src.bookservice.core.services import CatalogHandler, DbSessionService
from src.bookservice.entities.service.book import BookRepository, CreateBookRequest
from src.bookservice.runtime.config.config_template import load_templated_yaml
from src.bookservice.runtime.context import CONFIG_PATH_ENV, get_config, set_config

console = Console()

app = typer.Typer(
    name="bookservice",
    help="Book service - run the API and manage its database",
    rich_markup_mode="rich",
)


@app.callback()
def main(
    config: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        exists=True,
        dir_okay=False,
        help="Configuration file to use instead of config.yaml",
    ),
) -> None:
    """Book service - run the API and manage its database."""
    if config is not None:
        set_config(load_templated_yaml(config))
        # Reloaded server processes read the file from the environment.
        os.environ[CONFIG_PATH_ENV] = str(config)


SAMPLE_BOOKS = [
    CreateBookRequest(title="Book One", author="Author A", genre="Fiction"),
    CreateBookRequest(title="Book Two", author="Author A", genre="Science"),
    CreateBookRequest(title="Book Three", author="Author B", genre="Fiction"),
    CreateBookRequest(title="Book Four", author="Author C", genre="Fantasy"),
    CreateBookRequest(title="Book Five", author="Author D", genre="Science"),
]


@app.command()
def serve(
    host: str | None = typer.Option(None, help="Bind address (defaults to config app.host)"),
    port: int | None = typer.Option(None, help="Port (defaults to config app.port)"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    config = get_config()
    uvicorn.run(
        "src.bookservice.api.http.app:app",
        host=host or config.app.host,
        port=port or config.app.port,
        reload=reload,
        access_log=False,
    )


@app.command("init-db")
def init_db() -> None:
    """Create the database tables."""
    DbSessionService(get_config()).create_all()
    console.print("[green]Database tables created[/green]")


@app.command()
def seed() -> None:
    """Insert the sample books, skipping ones that already exist."""
    config = get_config()
    database_service = DbSessionService(config)
    database_service.create_all()

    auth = config.authorization
    admin_claim = RequiredClaim(type=auth.admin_claim_type, value=auth.admin_claim_value)
    operator = Principal(subject="cli", claims={admin_claim.type: (admin_claim.value,)})

    table = Table(title="Seeded books")
    table.add_column("Id", justify="right")
    table.add_column("Title")
    table.add_column("Author")
    table.add_column("Genre")
    table.add_column("Status")

    with database_service.session_scope() as session:
        handler = CatalogHandler(
            BookRepository(session),
            admin_claim=admin_claim,
            default_limit=config.pagination.default_limit,
        )
        for request in SAMPLE_BOOKS:
            try:
                book = handler.create_book(operator, request)
            except ConflictError:
                table.add_row("-", request.title, request.author, request.genre, "exists")
                continue
            table.add_row(str(book.id), book.title, book.author, book.genre, "created")

    console.print(table)


if __name__ == "__main__":
    app()
