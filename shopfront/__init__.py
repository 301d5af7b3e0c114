"""Shopfront - Root Package.

A small order-placement service layer illustrating three classic design
patterns:

    - Singleton: one shared instance per service, owned by the DI container
    - Strategy/Repository: address lookup by postal code behind an interface
      whose backing store is chosen by configuration
    - Facade: OrderFacade coordinates customer, product and shipping fee
      lookups into a single Order

Key Components:
    - domain: records, lookup contracts and exceptions
    - application: customer service, shipping fee calculator, order facade
    - infrastructure: DI container, singleton registry, logging, repositories
    - config: pydantic configuration schemas and loading
    - cli: command-line interface
"""

from ._package import PACKAGE_NAME, __version__

__package_name__ = PACKAGE_NAME
