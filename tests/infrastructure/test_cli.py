"""Tests for the click command line, end to end on temporary stores."""

import json

import pytest
from click.testing import CliRunner

from storeorders.infrastructure.cli import main as cli_main
from storeorders.infrastructure.cli.main import cli


@pytest.fixture
def run(tmp_path, monkeypatch):
    monkeypatch.setattr(cli_main, "configure_logging", lambda settings: None)
    runner = CliRunner()
    env = {
        "STORE_ORDERS_DATA_DIR": str(tmp_path / "data"),
        "STORE_ORDERS_CATALOG_URL": f"sqlite:///{tmp_path / 'catalog.db'}",
        "STORE_ORDERS_DELETE_MODE": "hard",
    }

    def _run(*args: str):
        return runner.invoke(cli, list(args), env=env)

    return _run


@pytest.fixture
def payload(tmp_path):
    def _write(quantity: int, price: str = "5.00", name: str = "order.json"):
        path = tmp_path / name
        path.write_text(json.dumps({
            "userId": 1,
            "client": {
                "name": "Ana",
                "email": "ana@example.com",
                "phone": 600123123,
                "address": {
                    "street": "Calle Mayor", "number": 10, "city": "Madrid",
                    "province": "Madrid", "country": "Spain", "zip": 28013,
                },
            },
            "orderLines": [
                {"productId": "P", "quantity": quantity, "productPrice": price, "total": 0},
            ],
        }))
        return str(path)

    return _write


def _order_id(output: str) -> str:
    return output.splitlines()[0].split()[1]


class TestCli:

    def test_full_lifecycle(self, run, payload):
        result = run("product", "add", "--id", "P", "--name", "Pencil", "--price", "5", "--stock", "10")
        assert result.exit_code == 0, result.output

        result = run("order", "create", "--file", payload(3))
        assert result.exit_code == 0, result.output
        order_id = _order_id(result.output)
        assert "15.00" in result.output

        assert "7" in run("product", "list").output.splitlines()[-1]

        result = run("order", "update", "--id", order_id, "--file", payload(5))
        assert result.exit_code == 0, result.output
        assert run("product", "list").output.splitlines()[-1].split()[-1] == "5"

        result = run("order", "show", "--id", order_id)
        assert result.exit_code == 0
        assert "25.00" in result.output

        assert order_id in run("order", "list").output
        assert order_id in run("order", "by-user", "--user-id", "1").output

        result = run("order", "remove", "--id", order_id)
        assert result.exit_code == 0, result.output
        assert run("product", "list").output.splitlines()[-1].split()[-1] == "10"
        assert "No interrupted sagas." in run("saga", "pending").output

    def test_domain_error_is_reported(self, run, payload):
        run("product", "add", "--id", "P", "--name", "Pencil", "--price", "5", "--stock", "2")
        result = run("order", "create", "--file", payload(3))
        assert result.exit_code == 1
        assert "not enough" in result.output

    def test_price_mismatch_is_reported(self, run, payload):
        run("product", "add", "--id", "P", "--name", "Pencil", "--price", "5", "--stock", "10")
        result = run("order", "create", "--file", payload(3, price="4"))
        assert result.exit_code == 1
        assert "price" in result.output

    def test_sub_cent_price_rejected_by_product_add(self, run):
        result = run("product", "add", "--id", "P", "--name", "Pencil", "--price", "5.005", "--stock", "10")
        assert result.exit_code == 1
        assert "two decimal places" in result.output

        result = run("product", "list")
        assert "Pencil" not in result.output

    def test_missing_order(self, run):
        result = run("order", "show", "--id", "nope")
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_invalid_payload(self, run, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"userId": 1}))
        result = run("order", "create", "--file", str(path))
        assert result.exit_code == 2
        assert "missing field" in result.output

    def test_invalid_sort_rejected_by_cli(self, run):
        result = run("order", "list", "--order-by", "total")
        assert result.exit_code == 2

    def test_empty_listings(self, run):
        assert "No orders found." in run("order", "list").output
        assert "No products found." in run("product", "list").output
