"""
CLI formatting functions for command output.

Supports JSON, YAML and Rich tables. Table output knows how to lay out the
``customer``, ``address``/``addresses``, ``products`` and ``order`` payloads
returned by the commands; anything else falls back to JSON.
"""
import json
from typing import Any, Dict, List

import yaml
from rich.console import Console
from rich.table import Table


def format_output(data: Any, format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == "yaml":
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
    if format_type == "table":
        return format_table_output(data)
    return json.dumps(data, indent=2, default=str)


def format_table_output(data: Any) -> str:
    """Format data as a table."""
    if isinstance(data, dict) and "order" in data:
        return format_order_table(data["order"])
    if isinstance(data, dict) and "products" in data:
        return _render(_records_table(data["products"], ["product_id", "name", "price"]))
    if isinstance(data, dict) and "addresses" in data:
        return _render(
            _records_table(data["addresses"], ["postal_code", "street", "city", "country"])
        )
    if isinstance(data, dict) and "address" in data:
        return _render(_key_value_table(data["address"]))
    if isinstance(data, dict) and "customer" in data:
        return format_customer_table(data["customer"])
    return json.dumps(data, indent=2, default=str)


def format_customer_table(customer: Dict[str, Any]) -> str:
    address = customer.get("address") or {}
    rows = {
        "customer_id": customer.get("customer_id"),
        "name": customer.get("name"),
        "postal_code": address.get("postal_code", ""),
    }
    return _render(_key_value_table(rows))


def format_order_table(order: Dict[str, Any]) -> str:
    """Format an order as an items table followed by its totals."""
    items = _records_table(order.get("items", []), ["product_id", "name", "price"])
    summary = _key_value_table(
        {
            "order_id": order.get("order_id"),
            "customer_id": (order.get("customer") or {}).get("customer_id"),
            "item_count": order.get("item_count"),
            "subtotal": order.get("subtotal"),
            "shipping_fee": order.get("shipping_fee"),
            "total": order.get("total"),
        }
    )
    return _render(summary, items)


def _records_table(records: List[Dict[str, Any]], columns: List[str]) -> Table:
    table = Table(show_header=True, header_style="bold magenta")
    for column in columns:
        table.add_column(column.replace("_", " ").title())
    for record in records:
        table.add_row(*(str(record.get(column, "")) for column in columns))
    return table


def _key_value_table(values: Dict[str, Any]) -> Table:
    table = Table(show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")
    for key, value in values.items():
        table.add_row(key, "" if value is None else str(value))
    return table


def _render(*tables: Table) -> str:
    console = Console(record=True, width=100)
    with console.capture() as capture:
        for table in tables:
            console.print(table)
    return capture.get().rstrip("\n")
