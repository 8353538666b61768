"""CLI commands for browsing the catalog."""

from __future__ import annotations

import click

from storefront.application.browse_catalog import BrowseCatalogHandler
from storefront.application.list_categories import ListCategoriesHandler
from storefront.domain.exceptions import CatalogUnavailableError, DomainException
from storefront.domain.model.filter_criteria import ALL_CATEGORIES, FilterCriteria
from storefront.infrastructure.bootstrap import catalog_filter, catalog_repository


@click.command("list")
@click.option("--category", default=ALL_CATEGORIES, show_default=True, help="Category name.")
@click.option("--search", default="", help="Text to look for in name or description.")
@click.option("--min-price", default=None, help="Lowest price to include (e.g. 50).")
@click.option("--max-price", default=None, help="Highest price to include (e.g. 2000).")
def catalog_list(category: str, search: str, min_price: str | None, max_price: str | None) -> None:
    """List products, priority items first."""
    handler = BrowseCatalogHandler(
        catalog_repo=catalog_repository(),
        catalog_filter=catalog_filter(),
    )

    try:
        criteria = FilterCriteria.of(category, search, min_price, max_price)
        page = handler.handle(criteria)
    except CatalogUnavailableError as exc:
        raise click.ClickException(f"Error loading products: {exc}")
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not page.products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<8} {'Name':<28} {'Category':<14} {'Single':>10} {'Dozen':>11}")
    click.echo("-" * 75)
    for p in page.products:
        name = p.name if p.discount <= 0 else f"{p.name} [{p.discount}% OFF]"
        click.echo(f"{p.id:<8} {name:<28} {p.category:<14} {p.price:>10} {p.dozen_price:>11}")
    click.echo("-" * 75)
    click.echo(f"{len(page.products)} product(s); catalog prices {page.lowest_price} - {page.highest_price}")


@click.command("categories")
def catalog_categories() -> None:
    """List categories in display order."""
    handler = ListCategoriesHandler(catalog_repo=catalog_repository())

    try:
        categories = handler.handle()
    except DomainException as exc:
        raise click.ClickException(f"Error loading categories: {exc}")

    if not categories:
        click.echo("No categories found.")
        return

    for c in categories:
        click.echo(f"{c.display_order:>3}  {c.name}")
