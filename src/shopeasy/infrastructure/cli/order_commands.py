"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from shopeasy.application.create_order import CreateOrderHandler
from shopeasy.application.dto import CreateOrderRequest, OrderDTO, OrderItemSpec
from shopeasy.application.list_orders import ListOrdersHandler
from shopeasy.application.show_order import ShowOrderHandler
from shopeasy.application.update_order_status import UpdateOrderStatusHandler
from shopeasy.domain.exceptions import DomainException
from shopeasy.domain.model.order_status import OrderStatus, can_transition
from shopeasy.infrastructure.bootstrap import order_repository


def _parse_items(raw: str) -> list[OrderItemSpec]:
    """Parse '1:3,4:5' (ProductId:Quantity pairs) into an OrderItemSpec list."""
    specs: list[OrderItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductId:Quantity'."
            )
        id_str, qty_str = pair.split(":", 1)
        try:
            product_id = int(id_str)
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid item '{pair}'. Product ID and quantity must be integers."
            )
        specs.append(OrderItemSpec(product_id=product_id, quantity=qty))
    return specs


def _next_statuses(status_name: str) -> str:
    status = OrderStatus.parse(status_name)
    if status is None or status.is_terminal:
        return "none (final)"
    return ", ".join(s.value for s in OrderStatus if s in status.allowed_targets())


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    click.echo(f"Customer: {dto.customer_name} (#{dto.customer_id})")
    click.echo(f"Ordered:  {dto.ordered_at}")
    click.echo(f"Ship to:  {dto.shipping_address}")
    click.echo(f"Next:     {_next_statuses(dto.status)}")
    if dto.notes:
        click.echo(f"Notes:    {dto.notes}")
    click.echo()
    click.echo(f"  {'Product':<24} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*51}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<24} {item.quantity:>5} {item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*51}")
    click.echo(f"  {'Order Total':<31} {dto.total:>20}")


@click.command("create")
@click.option("--customer-id", required=True, type=int, help="Customer ID.")
@click.option("--address", required=True, help="Shipping address.")
@click.option("--notes", default=None, help="Optional delivery notes.")
@click.option("--items", required=True, help="Items as 'ProductId:Qty,ProductId:Qty'.")
def order_create(customer_id: int, address: str, notes: str | None, items: str) -> None:
    """Place a new order."""
    request = CreateOrderRequest(
        customer_id=customer_id,
        shipping_address=address,
        items=_parse_items(items),
        notes=notes,
    )
    handler = CreateOrderHandler(order_repo=order_repository())

    try:
        dto = handler.handle(request)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{dto.id} created.")
    _display_order(dto)


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
def order_show(order_id: int) -> None:
    """Show details of an existing order."""
    dto = ShowOrderHandler(order_repo=order_repository()).handle(order_id)
    if dto is None:
        raise click.ClickException(f"Order #{order_id} not found")

    _display_order(dto)


@click.command("list")
@click.option("--customer-id", type=int, default=None, help="Only this customer's orders.")
def order_list(customer_id: int | None) -> None:
    """List orders, newest first."""
    handler = ListOrdersHandler(order_repo=order_repository())
    orders = handler.all() if customer_id is None else handler.by_customer(customer_id)

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<6} {'Ordered':<24} {'Customer':<20} {'Status':<10} {'Total':>10}")
    click.echo("-" * 74)
    for dto in orders:
        click.echo(
            f"{dto.id:<6} {dto.ordered_at:<24} {dto.customer_name:<20} {dto.status:<10} {dto.total:>10}"
        )


@click.command("status")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to update.")
@click.option("--to", "status_name", required=True, help="Target status, e.g. Shipped.")
def order_status(order_id: int, status_name: str) -> None:
    """Move an order to a new lifecycle status."""
    handler = UpdateOrderStatusHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id, status_name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{dto.id} is now {dto.status}.")
    click.echo(f"Next:     {_next_statuses(dto.status)}")


@click.command("can-transition")
@click.option("--from", "current", required=True, help="Current status.")
@click.option("--to", "target", required=True, help="Requested status.")
def order_can_transition(current: str, target: str) -> None:
    """Check whether the lifecycle allows a status change (no order needed)."""
    if can_transition(current, target):
        click.echo(f"{current} -> {target}: allowed")
    else:
        click.echo(f"{current} -> {target}: not allowed")
