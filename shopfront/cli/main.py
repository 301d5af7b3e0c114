"""
Main CLI module with argument parsing and command execution.

Usage examples:
  shopfront customers show 42
  shopfront addresses show 10001
  shopfront products list --format table
  shopfront orders place 42 P1 P2
"""
import argparse
import sys
from typing import Any, Dict, List, Optional

from shopfront._package import PACKAGE_NAME, __version__
from shopfront.bootstrap import Application
from shopfront.domain.base.exceptions import DomainException
from shopfront.infrastructure.di.exceptions import FactoryError
from shopfront.infrastructure.logging.logger import get_logger, setup_logging
from shopfront.infrastructure.persistence.exceptions import PersistenceError

from .formatters import format_output

logger = get_logger(__name__)

OUTPUT_FORMATS = ["json", "yaml", "table"]


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments with resource-action structure."""
    parser = argparse.ArgumentParser(
        prog=PACKAGE_NAME,
        description="Customer lookup, address lookup and order placement",
    )
    parser.add_argument("--config", help="Configuration file path")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override the configured logging level",
    )
    parser.add_argument("--format", choices=OUTPUT_FORMATS, default="json", help="Output format")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="resource", required=True, help="Available resources")

    customers = subparsers.add_parser("customers", help="Look up customers")
    customers_actions = customers.add_subparsers(dest="action", required=True)
    customers_show = customers_actions.add_parser("show", help="Show a customer")
    customers_show.add_argument("customer_id", type=int, help="Customer ID")

    addresses = subparsers.add_parser("addresses", help="Look up addresses")
    addresses_actions = addresses.add_subparsers(dest="action", required=True)
    addresses_show = addresses_actions.add_parser("show", help="Show the address for a postal code")
    addresses_show.add_argument("postal_code", help="Postal code")
    addresses_actions.add_parser("list", help="List all addresses")

    products = subparsers.add_parser("products", help="Browse the product catalog")
    products_actions = products.add_subparsers(dest="action", required=True)
    products_actions.add_parser("list", help="List all products")

    orders = subparsers.add_parser("orders", help="Place orders")
    orders_actions = orders.add_subparsers(dest="action", required=True)
    orders_place = orders_actions.add_parser("place", help="Place an order")
    orders_place.add_argument("customer_id", type=int, help="Customer ID")
    orders_place.add_argument("product_ids", nargs="+", help="Product IDs, in order")

    return parser.parse_args(argv)


def execute_command(args: argparse.Namespace, app: Application) -> Dict[str, Any]:
    """Route a parsed command to the application services."""
    command = (args.resource, args.action)

    if command == ("customers", "show"):
        customer = app.get_customer_lookup().get_customer(args.customer_id)
        return {"customer": customer.to_dict()}

    if command == ("addresses", "show"):
        address = app.get_address_repository().get_by_postal_code(args.postal_code)
        return {"address": address.to_dict()}

    if command == ("addresses", "list"):
        addresses = app.get_address_repository().find_all()
        return {"addresses": [a.to_dict() for a in addresses]}

    if command == ("products", "list"):
        products = app.get_product_catalog().list_products()
        return {"products": [p.to_dict() for p in products]}

    if command == ("orders", "place"):
        order = app.get_order_facade().place_order(args.customer_id, args.product_ids)
        return {"order": order.to_dict()}

    raise ValueError(f"Unknown command: {args.resource} {args.action}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)

    try:
        app = Application(args.config).initialize()
        if args.log_level:
            setup_logging(app.config.logging.model_copy(update={"level": args.log_level}))

        result = execute_command(args, app)
    except (DomainException, PersistenceError) as e:
        logger.debug("Command failed: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except FactoryError as e:
        # Service factories wrap the domain error that stopped them
        if not isinstance(e.cause, (DomainException, PersistenceError)):
            raise
        logger.debug("Service creation failed: %s", e)
        print(f"Error: {e.cause}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nOperation cancelled by user.", file=sys.stderr)
        return 130

    print(format_output(result, args.format))
    return 0


if __name__ == "__main__":
    sys.exit(main())
