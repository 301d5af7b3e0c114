"""Order application services."""

from .facade import OrderFacade

__all__ = ["OrderFacade"]
