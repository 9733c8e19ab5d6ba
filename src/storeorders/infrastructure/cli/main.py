import click

from storeorders.infrastructure.cli.order_commands import (
    order_by_user,
    order_create,
    order_list,
    order_remove,
    order_show,
    order_update,
)
from storeorders.infrastructure.cli.product_commands import product_add, product_list
from storeorders.infrastructure.cli.saga_commands import saga_pending
from storeorders.infrastructure.config import load_settings
from storeorders.infrastructure.logging_config import bind_context, configure_logging


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """store-orders — order processing with stock reservation"""
    settings = load_settings()
    configure_logging(settings)
    bind_context(command=ctx.invoked_subcommand)
    ctx.obj = settings


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def product() -> None:
    """Manage the product catalog."""


@cli.group()
def saga() -> None:
    """Inspect the saga journal."""


# Register subcommands
order.add_command(order_by_user)
order.add_command(order_create)
order.add_command(order_list)
order.add_command(order_remove)
order.add_command(order_show)
order.add_command(order_update)
product.add_command(product_add)
product.add_command(product_list)
saga.add_command(saga_pending)
