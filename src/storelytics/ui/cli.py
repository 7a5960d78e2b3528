from __future__ import annotations

from enum import Enum
from pathlib import Path
import sys

from dotenv import load_dotenv
from loguru import logger
import typer

from storelytics.catalog.loader import (
    Catalog,
    CatalogLoadError,
    default_catalog,
    load_catalog,
)
from storelytics.core.config import load_store_config_from_env, log_config
from storelytics.pipeline.runner import DEFAULT_QUERY, DashboardRunner
from storelytics.pipeline.totals import filter_orders_since, top_seller
from storelytics.ui.markdown import print_markdown, report_markdown
from storelytics.ui.report import top_seller_line

# Load environment variables from .env
load_dotenv()

app = typer.Typer(
    help="Storelytics — mini store analytics dashboard.",
    invoke_without_command=True,
    no_args_is_help=False,
)


class OutputFormat(str, Enum):
    text = "text"
    markdown = "markdown"


class SortBy(str, Enum):
    price = "price"
    name = "name"


def _configure_logging(verbose: bool) -> None:
    """Send loguru output to stderr; stdout is reserved for the dashboard."""
    logger.remove()
    logger.add(
        sys.stderr,
        format="{time:YYYY-MM-DD HH:mm:ss} [{level}] {name}: {message}",
        level="DEBUG" if verbose else "WARNING",
    )


def _load(catalog_path: Path | None) -> Catalog:
    try:
        config = load_store_config_from_env()
    except ValueError as e:
        typer.echo(f"Invalid configuration: {e}", err=True)
        raise typer.Exit(1) from None

    if catalog_path is None:
        return default_catalog(config)
    try:
        return load_catalog(catalog_path, default_config=config)
    except CatalogLoadError as e:
        typer.echo(f"Failed to load catalog: {e}", err=True)
        raise typer.Exit(1) from None


@app.callback()
def main_callback(ctx: typer.Context) -> None:
    """CLI callback that runs the dashboard when no subcommand is provided."""
    if ctx.invoked_subcommand is None:
        _dashboard_impl()


@app.command()
def dashboard(
    query: str = typer.Option(DEFAULT_QUERY, help="Search text for visible cards"),
    show_out_of_stock: bool | None = typer.Option(
        None,
        "--show-out-of-stock/--hide-out-of-stock",
        help="Override the configured out-of-stock visibility",
    ),
    since: str | None = typer.Option(
        None, help="Only aggregate orders created on or after this date (YYYY-MM-DD)"
    ),
    sort: SortBy | None = typer.Option(None, help="Sort visible cards"),
    descending: bool = typer.Option(False, "--descending", help="Reverse the sort"),
    catalog: Path | None = typer.Option(
        None, "--catalog", help="Path to a catalog YAML file"
    ),
    output_format: OutputFormat = typer.Option(
        OutputFormat.text, "--format", help="Output format"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logs"),
) -> None:
    """Print config, product cards, filtered cards, totals and the report."""
    _dashboard_impl(
        query=query,
        show_out_of_stock=show_out_of_stock,
        since=since,
        sort=sort,
        descending=descending,
        catalog=catalog,
        output_format=output_format,
        verbose=verbose,
    )


def _dashboard_impl(
    *,
    query: str = DEFAULT_QUERY,
    show_out_of_stock: bool | None = None,
    since: str | None = None,
    sort: SortBy | None = None,
    descending: bool = False,
    catalog: Path | None = None,
    output_format: OutputFormat = OutputFormat.text,
    verbose: bool = False,
) -> None:
    _configure_logging(verbose)
    loaded = _load(catalog)

    markdown = output_format is OutputFormat.markdown
    runner = DashboardRunner(
        config=loaded.config,
        products=loaded.products,
        orders=loaded.orders,
        emit=(lambda _line: None) if markdown else typer.echo,
    )
    try:
        result = runner.run(
            query=query,
            show_out_of_stock=show_out_of_stock,
            since=since,
            sort_by=sort.value if sort is not None else None,
            descending=descending,
        )
    except ValueError as e:
        typer.echo(f"Invalid option: {e}", err=True)
        raise typer.Exit(1) from None

    if markdown:
        print_markdown(
            report_markdown(result.visible_cards, result.totals, loaded.config.currency)
        )


@app.command("config")
def config_cmd(
    catalog: Path | None = typer.Option(
        None, "--catalog", help="Path to a catalog YAML file"
    ),
) -> None:
    """Print the effective dashboard configuration."""
    _configure_logging(False)
    log_config(_load(catalog).config, typer.echo)


@app.command("top-seller")
def top_seller_cmd(
    since: str | None = typer.Option(
        None, help="Only count orders created on or after this date (YYYY-MM-DD)"
    ),
    catalog: Path | None = typer.Option(
        None, "--catalog", help="Path to a catalog YAML file"
    ),
) -> None:
    """Print the product with the most units sold."""
    _configure_logging(False)
    loaded = _load(catalog)
    orders = loaded.orders
    if since is not None:
        try:
            orders = tuple(filter_orders_since(orders, since))
        except ValueError as e:
            typer.echo(f"Invalid option: {e}", err=True)
            raise typer.Exit(1) from None
    typer.echo(top_seller_line(top_seller(orders, loaded.products)))


def main() -> None:
    app()
