"""Standard singleton access functions."""
from typing import Any, Type, TypeVar

from shopfront.infrastructure.di.container import get_container
from shopfront.infrastructure.patterns.singleton_registry import SingletonRegistry

T = TypeVar("T")


def get_singleton(singleton_class: Type[T], *args: Any, **kwargs: Any) -> T:
    """
    Standard way to get singleton instances.

    Instances registered with the DI container take precedence; otherwise the
    SingletonRegistry creates (once) and returns the shared instance.

    Args:
        singleton_class: The class to get an instance of
        *args: Constructor arguments, used only when creating the instance
        **kwargs: Constructor keyword arguments, used only when creating the instance

    Returns:
        The singleton instance
    """
    container = get_container()
    if container.is_registered(singleton_class):
        return container.get(singleton_class)

    return SingletonRegistry.get_instance().get(singleton_class, *args, **kwargs)
