"""CLI commands for the Order aggregate."""

from __future__ import annotations

import json
from decimal import Decimal
from typing import IO

import click

from storeorders.application.create_order import CreateOrderHandler
from storeorders.application.dto import (
    AddressSpec,
    ClientSpec,
    OrderDTO,
    OrderLineSpec,
    OrderSpec,
)
from storeorders.application.list_orders import (
    ORDER_BY_VALUES,
    ORDER_VALUES,
    ListOrdersHandler,
)
from storeorders.application.remove_order import RemoveOrderHandler
from storeorders.application.show_order import ShowOrderHandler
from storeorders.application.update_order import UpdateOrderHandler
from storeorders.domain.exceptions import DomainException
from storeorders.infrastructure.bootstrap import (
    catalog_repository,
    order_repository,
    saga_log_repository,
)
from storeorders.infrastructure.config import Settings


def _load_spec(stream: IO[str]) -> OrderSpec:
    """Parse an order payload shaped like the stored order document."""
    try:
        raw = json.load(stream, parse_float=Decimal)
        client = raw["client"]
        address = client["address"]
        return OrderSpec(
            user_id=int(raw["userId"]),
            client=ClientSpec(
                name=client["name"],
                email=client["email"],
                phone=int(client["phone"]),
                address=AddressSpec(
                    street=address["street"],
                    number=int(address["number"]),
                    city=address["city"],
                    province=address["province"],
                    country=address["country"],
                    zip=int(address["zip"]),
                ),
            ),
            order_lines=[
                OrderLineSpec(
                    product_id=str(line["productId"]),
                    quantity=line["quantity"],
                    product_price=str(line["productPrice"]),
                )
                for line in raw.get("orderLines") or []
            ],
        )
    except json.JSONDecodeError as exc:
        raise click.BadParameter(f"Payload is not valid JSON: {exc}")
    except KeyError as exc:
        raise click.BadParameter(f"Payload is missing field {exc}")
    except (AttributeError, TypeError, ValueError) as exc:
        raise click.BadParameter(f"Invalid payload: {exc}")


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order {dto.id}  (user={dto.user_id})")
    click.echo(f"Client:   {dto.client.name} <{dto.client.email}>")
    click.echo(f"Created:  {dto.created_at}")
    click.echo(f"Updated:  {dto.updated_at}")
    click.echo()
    click.echo(f"  {'Product':<34} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*62}")
    for line in dto.order_lines:
        click.echo(
            f"  {line.product_id:<34} {line.quantity:>5} {line.product_price:>10} {line.total:>10}"
        )
    click.echo(f"  {'-'*62}")
    click.echo(f"  {'Items':<34} {dto.total_items:>5} {'Total':>10} {dto.total:>10}")


@click.command("create")
@click.option("--file", "payload", required=True, type=click.File("r"), help="Order payload (JSON).")
@click.pass_obj
def order_create(settings: Settings, payload: IO[str]) -> None:
    """Create an order and reserve its stock."""
    spec = _load_spec(payload)
    handler = CreateOrderHandler(
        order_repo=order_repository(settings),
        catalog_repo=catalog_repository(settings),
        saga_log=saga_log_repository(settings),
    )

    try:
        dto = handler.handle(spec)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("update")
@click.option("--id", "order_id", required=True, help="Order ID to update.")
@click.option("--file", "payload", required=True, type=click.File("r"), help="Order payload (JSON).")
@click.pass_obj
def order_update(settings: Settings, order_id: str, payload: IO[str]) -> None:
    """Replace an order's lines, moving stock accordingly."""
    spec = _load_spec(payload)
    handler = UpdateOrderHandler(
        order_repo=order_repository(settings),
        catalog_repo=catalog_repository(settings),
        saga_log=saga_log_repository(settings),
    )

    try:
        dto = handler.handle(order_id, spec)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("remove")
@click.option("--id", "order_id", required=True, help="Order ID to remove.")
@click.pass_obj
def order_remove(settings: Settings, order_id: str) -> None:
    """Remove an order and return its stock."""
    handler = RemoveOrderHandler(
        order_repo=order_repository(settings),
        catalog_repo=catalog_repository(settings),
        saga_log=saga_log_repository(settings),
        delete_mode=settings.delete_mode,
    )

    try:
        handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {order_id} removed — stock returned.")


@click.command("show")
@click.option("--id", "order_id", required=True, help="Order ID to display.")
@click.pass_obj
def order_show(settings: Settings, order_id: str) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repo=order_repository(settings))

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


def _display_rows(orders: list[OrderDTO]) -> None:
    click.echo(f"{'ID':<34} {'User':>6} {'Items':>6} {'Total':>10}")
    click.echo("-" * 59)
    for dto in orders:
        click.echo(f"{dto.id:<34} {dto.user_id:>6} {dto.total_items:>6} {dto.total:>10}")


@click.command("list")
@click.option("--page", default=1, show_default=True, type=int, help="Page number.")
@click.option("--limit", default=None, type=int, help="Orders per page.")
@click.option("--order-by", default=None, type=click.Choice(ORDER_BY_VALUES), help="Sort field.")
@click.option("--direction", default=None, type=click.Choice(ORDER_VALUES), help="Sort direction.")
@click.pass_obj
def order_list(
    settings: Settings,
    page: int,
    limit: int | None,
    order_by: str | None,
    direction: str | None,
) -> None:
    """List orders one page at a time."""
    handler = ListOrdersHandler(order_repository(settings), default_limit=settings.page_size)

    try:
        result = handler.page(page, limit, order_by, direction)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not result.items:
        click.echo("No orders found.")
        return

    _display_rows(result.items)
    click.echo(
        f"Page {result.page}/{result.total_pages}  ({result.total_items} orders)"
    )


@click.command("by-user")
@click.option("--user-id", required=True, type=int, help="User whose orders to list.")
@click.pass_obj
def order_by_user(settings: Settings, user_id: int) -> None:
    """List every order placed by a user."""
    orders = ListOrdersHandler(order_repository(settings)).by_user(user_id)

    if not orders:
        click.echo(f"No orders found for user {user_id}.")
        return

    _display_rows(orders)
