import click

from shopeasy.infrastructure.bootstrap import store
from shopeasy.infrastructure.cli.customer_commands import customer_list, customer_show
from shopeasy.infrastructure.cli.order_commands import (
    order_can_transition,
    order_create,
    order_list,
    order_show,
    order_status,
)
from shopeasy.infrastructure.cli.product_commands import (
    product_categories,
    product_list,
    product_show,
)
from shopeasy.infrastructure.config import load_settings
from shopeasy.infrastructure.log_config import configure_logging
from shopeasy.infrastructure.seed import seed_store


@click.group()
def cli() -> None:
    """ShopEasy order management."""
    try:
        settings = load_settings()
    except ValueError as exc:
        raise click.ClickException(f"Invalid configuration: {exc}")
    configure_logging(settings.log_level, settings.log_json)


@cli.group()
def order() -> None:
    """Place, inspect and advance orders."""


@cli.group()
def product() -> None:
    """Browse the product catalog."""


@cli.group()
def customer() -> None:
    """Look up customers."""


@cli.command("seed")
def seed() -> None:
    """Load the demo catalog and customers into an empty store."""
    if seed_store(store()):
        click.echo("Demo data loaded.")
    else:
        click.echo("Store already has data; nothing loaded.")


# Register subcommands
order.add_command(order_can_transition)
order.add_command(order_create)
order.add_command(order_list)
order.add_command(order_show)
order.add_command(order_status)
product.add_command(product_categories)
product.add_command(product_list)
product.add_command(product_show)
customer.add_command(customer_list)
customer.add_command(customer_show)
