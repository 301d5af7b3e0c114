"""
Injectable decorator for automatic dependency injection.

Marks a class so the DI container resolves its constructor dependencies
from their type annotations without an explicit factory function.
"""
import inspect
from typing import Any, Dict, Type, TypeVar, Union, get_args, get_origin, get_type_hints

from shopfront.infrastructure.logging.logger import get_logger

T = TypeVar("T")

logger = get_logger(__name__)


def injectable(cls: Type[T] = None, *, singleton: bool = True):
    """
    Mark a class as injectable with automatic dependency resolution.

    Usage:
        @injectable
        class OrderFacade:
            def __init__(self, customer_lookup: CustomerLookup, ...):
                ...

    Args:
        cls: The class to make injectable
        singleton: Whether the container should share a single instance

    Returns:
        The same class, marked injectable
    """

    def wrap(target: Type[T]) -> Type[T]:
        target._injectable = True
        target._injectable_singleton = singleton
        logger.debug("Made %s injectable", target.__name__)
        return target

    if cls is None:
        return wrap
    return wrap(cls)


def is_injectable(cls: Type) -> bool:
    """Check if a class has been marked as injectable."""
    return bool(getattr(cls, "_injectable", False))


def is_singleton(cls: Type) -> bool:
    return is_injectable(cls) and bool(getattr(cls, "_injectable_singleton", True))


def is_primitive_type(annotation: Any) -> bool:
    """Check if an annotation is a primitive that is never resolved from the container."""
    primitive_types = {str, int, float, bool, bytes, dict, list, tuple, set, type(None)}

    if annotation in primitive_types or annotation is Any:
        return True

    origin = get_origin(annotation)
    return origin in primitive_types


def is_optional_type(annotation: Any) -> bool:
    """Check if a type annotation represents Optional[T]."""
    if get_origin(annotation) is Union:
        args = get_args(annotation)
        return len(args) == 2 and type(None) in args
    return False


def extract_optional_inner_type(annotation: Any) -> Any:
    """Extract T from Optional[T]."""
    return next(arg for arg in get_args(annotation) if arg is not type(None))


def get_constructor_dependencies(cls: Type) -> Dict[str, inspect.Parameter]:
    """Return constructor parameters of a class with resolved annotations."""
    try:
        hints = get_type_hints(cls.__init__)
    except Exception as e:
        logger.warning("Could not get type hints for %s: %s", cls.__name__, e)
        hints = {}

    params: Dict[str, inspect.Parameter] = {}
    for name, param in inspect.signature(cls.__init__).parameters.items():
        if name == "self" or param.kind in (param.VAR_POSITIONAL, param.VAR_KEYWORD):
            continue
        params[name] = param.replace(annotation=hints.get(name, param.annotation))
    return params

