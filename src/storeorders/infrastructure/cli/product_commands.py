"""CLI commands for catalog provisioning."""

from __future__ import annotations

import click

from storeorders.application.add_product import AddProductHandler
from storeorders.domain.exceptions import DomainException
from storeorders.infrastructure.bootstrap import catalog_repository
from storeorders.infrastructure.config import Settings


@click.command("add")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--stock", required=True, type=int, help="Units in stock.")
@click.pass_obj
def product_add(settings: Settings, product_id: str, name: str, price: str, stock: int) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(catalog_repo=catalog_repository(settings))

    try:
        product = handler.handle(product_id=product_id, name=name, price=price, stock=stock)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Product {product.id} '{product.name}' added at {product.price} "
        f"with {product.stock} in stock"
    )


@click.command("list")
@click.pass_obj
def product_list(settings: Settings) -> None:
    """List all products in the catalog."""
    products = catalog_repository(settings).list_all()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<20} {'Name':<20} {'Price':>10} {'Stock':>8}")
    click.echo("-" * 61)
    for p in products:
        click.echo(f"{p.id:<20} {p.name:<20} {str(p.price):>10} {p.stock:>8}")
