"""CLI commands for customer lookups."""

from __future__ import annotations

import click

from shopeasy.application.show_customers import ListCustomersHandler, ShowCustomerHandler
from shopeasy.infrastructure.bootstrap import customer_repository


@click.command("list")
def customer_list() -> None:
    """List all customers."""
    customers = ListCustomersHandler(customer_repo=customer_repository()).handle()

    if not customers:
        click.echo("No customers found.")
        return

    click.echo(f"{'ID':<6} {'Name':<24} {'Email':<28}")
    click.echo("-" * 58)
    for c in customers:
        click.echo(f"{c.id:<6} {c.full_name:<24} {c.email:<28}")


@click.command("show")
@click.option("--id", "customer_id", required=True, type=int, help="Customer ID.")
def customer_show(customer_id: int) -> None:
    """Show a single customer."""
    dto = ShowCustomerHandler(customer_repo=customer_repository()).handle(customer_id)
    if dto is None:
        raise click.ClickException(f"Customer #{customer_id} not found")

    click.echo(f"Customer #{dto.id}: {dto.full_name}")
    click.echo(f"Email:  {dto.email}")
    click.echo(f"Joined: {dto.created_at}")
