import click

from storefront.infrastructure.cli.cart_commands import cart_quote
from storefront.infrastructure.cli.catalog_commands import catalog_categories, catalog_list
from storefront.infrastructure.config import get_settings
from storefront.infrastructure.observability import configure_logging


@click.group()
def cli() -> None:
    """Storefront: browse the catalog and price a cart"""
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_format)


@cli.group()
def catalog() -> None:
    """Browse the catalog."""


@cli.group()
def cart() -> None:
    """Build and price a cart."""


# Register subcommands
catalog.add_command(catalog_list)
catalog.add_command(catalog_categories)
cart.add_command(cart_quote)
