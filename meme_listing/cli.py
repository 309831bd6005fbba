"""CLI entry point for the Meme Token Listing API.

Usage:
    meme-listing tokens
    meme-listing tokens --page 2 --per-page 25 --sort price_change
    meme-listing token brett
    meme-listing select brett --wallet 0xYourAddress
    meme-listing serve --port 8000
"""

import json
import logging
from pathlib import Path
from typing import Optional

import typer
import uvicorn
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from .core.config import APIConfig, get_config, reload_config
from .core.exceptions import MemeListingError
from .core.models import ListingOptions
from .core.types import WALLET_REQUIRED_MESSAGE, SelectionOutcome, SortColumn
from .output.formatters import JSONFormatter, TableFormatter, sort_entries
from .service import TokenListingService

# Initialize app
app = typer.Typer(
    name="meme-listing",
    help="Meme token listing and Base swap selection",
    add_completion=False,
)

console = Console()
log_console = Console(stderr=True)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=log_console, show_time=False, show_path=False)],
    )
    # httpx logs full request URLs, and the listing URL carries the API key
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def _load_config(env_file: Optional[Path]) -> APIConfig:
    return reload_config(env_file) if env_file else get_config()


def _get_service(env_file: Optional[Path] = None) -> TokenListingService:
    """Build the service from environment configuration."""
    config = _load_config(env_file)
    if not config.has_coingecko():
        console.print("[yellow]COINGECKO_API_KEY is not set; listing requests may be rejected[/]")
    return TokenListingService.from_config(config)


ENV_FILE_OPTION = typer.Option(None, "--env-file", help="Path to .env file")
VERBOSE_OPTION = typer.Option(False, "--verbose", "-v", help="Enable verbose logging")


@app.command()
def tokens(
    page: int = typer.Option(1, "--page", "-p", help="Listing page (1-based)"),
    per_page: int = typer.Option(100, "--per-page", "-n", help="Tokens per page"),
    sparkline: bool = typer.Option(True, "--sparkline/--no-sparkline", help="Include 7d sparkline"),
    sort: Optional[str] = typer.Option(
        None,
        "--sort", "-s",
        help="Sort column: rank, name, price, price_change, market_cap, volume",
    ),
    descending: bool = typer.Option(False, "--desc", help="Sort descending"),
    output: str = typer.Option("table", "--output", "-o", help="Output format: table, json"),
    save: Optional[Path] = typer.Option(
        None,
        "--save",
        help="Also write the output to a file",
    ),
    env_file: Optional[Path] = ENV_FILE_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """
    Show one page of meme tokens ordered by market cap.

    Examples:
        meme-listing tokens
        meme-listing tokens --page 2 --per-page 25 --sort volume --desc
    """
    setup_logging(verbose)

    column = None
    if sort:
        try:
            column = SortColumn(sort)
        except ValueError:
            console.print(f"[red]Invalid sort column: {sort}[/]")
            console.print(f"Valid columns: {', '.join(c.value for c in SortColumn)}")
            raise typer.Exit(1)

    service = _get_service(env_file)
    entries = service.get_tokens(
        ListingOptions(sparkline=sparkline, page=page, per_page=per_page)
    )
    if column is not None:
        entries = sort_entries(entries, column, descending=descending)

    if output.lower() == "json":
        formatter = JSONFormatter()
        print(formatter.format(entries))
    else:
        formatter = TableFormatter(color=False)
        print(TableFormatter(color=console.is_terminal).format(entries), end="")

    if save:
        save.parent.mkdir(parents=True, exist_ok=True)
        formatter.format_to_file(entries, str(save))
        console.print(f"[green]Saved to {escape(str(save))}[/]")


@app.command()
def token(
    token_id: str = typer.Argument(..., help="CoinGecko coin ID (e.g., brett)"),
    env_file: Optional[Path] = ENV_FILE_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Print the full CoinGecko record for a coin as JSON."""
    setup_logging(verbose)
    service = _get_service(env_file)

    try:
        detail = service.get_token_by_id(token_id)
    except MemeListingError as e:
        console.print(f"[red]Error: {escape(e.message)}[/]")
        raise typer.Exit(1)

    print(json.dumps(detail.model_dump(exclude_unset=True), indent=2, ensure_ascii=False))


@app.command()
def select(
    token_id: str = typer.Argument(..., help="CoinGecko coin ID from the listing"),
    wallet: Optional[str] = typer.Option(None, "--wallet", "-w", help="Connected wallet address"),
    page: int = typer.Option(1, "--page", "-p", help="Listing page holding the token"),
    per_page: int = typer.Option(100, "--per-page", "-n", help="Tokens per page"),
    env_file: Optional[Path] = ENV_FILE_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """
    Resolve a listed token to its Base swap token.

    The token must appear on the requested listing page.
    """
    setup_logging(verbose)

    # No provider request without a connected wallet
    if not wallet:
        outcome = SelectionOutcome.WALLET_NOT_CONNECTED.value
        console.print(f"[yellow]{outcome}[/]: {WALLET_REQUIRED_MESSAGE}")
        raise typer.Exit(1)

    service = _get_service(env_file)
    entries = service.get_tokens(ListingOptions(page=page, per_page=per_page))
    entry = next((e for e in entries if e.id == token_id), None)
    if entry is None:
        console.print(f"[red]{token_id} is not on listing page {page}[/]")
        raise typer.Exit(1)

    result = service.select_token(entry, wallet)
    if not result.selected:
        detail = escape(result.message or result.error or token_id)
        console.print(f"[yellow]{result.outcome.value}[/]: {detail}")
        raise typer.Exit(1)

    print(json.dumps(result.token.to_dict(), indent=2))


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", "--host", help="Bind address"),
    port: int = typer.Option(8000, "--port", help="Bind port"),
    env_file: Optional[Path] = ENV_FILE_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Run the HTTP API."""
    from .api.app import create_app

    setup_logging(verbose)
    try:
        api = create_app(config=_load_config(env_file))
    except MemeListingError as e:
        console.print(f"[red]{escape(e.message)}[/]")
        raise typer.Exit(1)

    uvicorn.run(api, host=host, port=port)


@app.command()
def version() -> None:
    """Show version information."""
    from . import __version__
    console.print(f"Meme Listing v{__version__}")


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
