"""CLI commands for browsing the catalog."""

from __future__ import annotations

import click

from shopeasy.application.browse_catalog import (
    ListCategoriesHandler,
    ListProductsHandler,
    ShowProductHandler,
)
from shopeasy.infrastructure.bootstrap import product_repository


@click.command("list")
@click.option("--category", default=None, help="Only products in this category.")
def product_list(category: str | None) -> None:
    """List active products in the catalog."""
    products = ListProductsHandler(product_repo=product_repository()).handle(category)

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<24} {'Category':<14} {'Stock':>6} {'Price':>10}")
    click.echo("-" * 64)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<24} {p.category:<14} {p.stock_quantity:>6} {p.price:>10}")


@click.command("show")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def product_show(product_id: int) -> None:
    """Show a single product."""
    dto = ShowProductHandler(product_repo=product_repository()).handle(product_id)
    if dto is None:
        raise click.ClickException(f"Product #{product_id} not found")

    click.echo(f"Product #{dto.id}: {dto.name}")
    click.echo(f"Category: {dto.category}")
    click.echo(f"Price:    {dto.price}")
    click.echo(f"Stock:    {dto.stock_quantity}")
    if dto.description:
        click.echo(f"\n{dto.description}")


@click.command("categories")
def product_categories() -> None:
    """List the categories of active products."""
    for category in ListCategoriesHandler(product_repo=product_repository()).handle():
        click.echo(category)
