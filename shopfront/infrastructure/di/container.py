"""
Dependency Injection Container implementation.

The container owns the single shared instance of every service registered
as a singleton. Services are wired explicitly at startup (see
``register_services``); consumers receive their collaborators through
constructor parameters and never look them up themselves.
"""
import inspect
import threading
import time
from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterator, List, Optional, Type, TypeVar, cast

from shopfront.infrastructure.logging.logger import get_logger

from .decorators import (
    extract_optional_inner_type,
    get_constructor_dependencies,
    is_injectable,
    is_optional_type,
    is_primitive_type,
    is_singleton,
)
from .exceptions import (
    CircularDependencyError,
    DependencyResolutionError,
    FactoryError,
    InstantiationError,
    UnregisteredDependencyError,
    UntypedParameterError,
)

T = TypeVar("T")
logger = get_logger(__name__)


@contextmanager
def timed_operation(operation_name: str) -> Iterator[None]:
    """Context manager to time and log an operation."""
    start_time = time.time()
    try:
        yield
    finally:
        elapsed_time = time.time() - start_time
        logger.debug("%s completed in %.4fs", operation_name, elapsed_time)


def _type_name(cls: Any) -> str:
    return cls.__name__ if hasattr(cls, "__name__") else str(cls)


class DIContainer:
    """
    Dependency injection container.

    Supports:
    - singletons (a type, a pre-created instance, or a factory called once)
    - transient factories (called on every resolution)
    - pre-registered instances
    - constructor resolution from type annotations for concrete classes
    - circular dependency detection
    """

    def __init__(self):
        self._singletons: Dict[Type, Any] = {}
        self._singleton_factories: Dict[Type, Callable[["DIContainer"], Any]] = {}
        self._factories: Dict[Type, Callable[["DIContainer"], Any]] = {}
        self._instances: Dict[Type, Any] = {}
        self._lock = threading.RLock()
        self._resolving: List[Type] = []

    def is_registered(self, cls: Type) -> bool:
        """Check if a type is registered with the container."""
        return (
            cls in self._instances
            or cls in self._singletons
            or cls in self._singleton_factories
            or cls in self._factories
        )

    def register_singleton(self, cls: Type[T], instance_or_factory: Any = None) -> None:
        """
        Register a singleton.

        Args:
            cls: Type to register
            instance_or_factory: None to construct ``cls`` itself, a concrete
                implementation class, a factory ``f(container)`` called on
                first resolution, or a pre-created instance
        """
        with self._lock:
            self._singleton_factories.pop(cls, None)
            if instance_or_factory is None:
                self._singletons[cls] = cls
                logger.debug("Registered singleton type %s", _type_name(cls))
            elif isinstance(instance_or_factory, type):
                self._singletons[cls] = instance_or_factory
                logger.debug(
                    "Registered singleton %s -> %s",
                    _type_name(cls),
                    _type_name(instance_or_factory),
                )
            elif callable(instance_or_factory):
                self._singletons.pop(cls, None)
                self._singleton_factories[cls] = instance_or_factory
                logger.debug("Registered singleton factory for %s", _type_name(cls))
            else:
                self._singletons[cls] = instance_or_factory
                logger.debug("Registered pre-created singleton for %s", _type_name(cls))

    def register_factory(self, cls: Type[T], factory: Callable[["DIContainer"], T]) -> None:
        """Register a factory called on every resolution of ``cls``."""
        self._factories[cls] = factory
        logger.debug("Registered factory for %s", _type_name(cls))

    def register_instance(self, cls: Type[T], instance: T) -> None:
        """Register a specific instance for a type."""
        self._instances[cls] = instance
        logger.debug("Registered instance for %s", _type_name(cls))

    def get(
        self,
        cls: Type[T],
        parent_type: Optional[Type] = None,
        parameter_name: Optional[str] = None,
        dependency_chain: Optional[List[Type]] = None,
    ) -> T:
        """
        Get an instance of the specified type.

        Raises:
            DependencyResolutionError: If the dependency cannot be resolved
        """
        chain = list(dependency_chain or [])
        if cls in chain:
            raise CircularDependencyError(chain + [cls])
        chain.append(cls)

        class_name = _type_name(cls)
        logger.debug(
            "Resolving dependency: %s%s",
            class_name,
            f" for {_type_name(parent_type)} parameter '{parameter_name}'" if parent_type else "",
        )

        with timed_operation(f"Resolve {class_name}"):
            if cls in self._instances:
                return cast(T, self._instances[cls])

            if cls in self._singletons or cls in self._singleton_factories:
                return cast(T, self._get_singleton(cls, chain))

            if cls in self._factories:
                return cast(T, self._call_factory(cls, self._factories[cls]))

            if inspect.isclass(cls) and is_injectable(cls) and is_singleton(cls):
                with self._lock:
                    if cls not in self._singletons:
                        self._singletons[cls] = cls
                return cast(T, self._get_singleton(cls, chain))

            if not inspect.isclass(cls) or inspect.isabstract(cls):
                raise UnregisteredDependencyError(cls, parent_type, parameter_name)

            return self._create_instance(cls, chain)

    def _get_singleton(self, cls: Type, chain: List[Type]) -> Any:
        with self._lock:
            if cls in self._singleton_factories:
                if cls in self._resolving:
                    raise CircularDependencyError(self._resolving + [cls])
                self._resolving.append(cls)
                try:
                    instance = self._call_factory(cls, self._singleton_factories[cls])
                finally:
                    self._resolving.remove(cls)
                del self._singleton_factories[cls]
                self._singletons[cls] = instance
                logger.debug("Singleton instance created from factory for %s", _type_name(cls))
                return instance

            registered = self._singletons[cls]
            if isinstance(registered, type):
                instance = self._create_instance(registered, chain)
                self._singletons[cls] = instance
                logger.debug("Singleton instance created for %s", _type_name(cls))
                return instance
            return registered

    def _call_factory(self, cls: Type, factory: Callable[["DIContainer"], Any]) -> Any:
        try:
            return factory(self)
        except DependencyResolutionError:
            raise
        except Exception as e:
            logger.error("Factory failed to create instance of %s: %s", _type_name(cls), e)
            raise FactoryError(cls, f"Factory function failed: {str(e)}", e) from e

    def _create_instance(self, cls: Type[T], chain: List[Type]) -> T:
        """Create an instance of ``cls`` resolving its constructor dependencies."""
        class_name = _type_name(cls)
        kwargs: Dict[str, Any] = {}

        for name, param in get_constructor_dependencies(cls).items():
            has_default = param.default is not inspect.Parameter.empty
            annotation = param.annotation

            if annotation is inspect.Parameter.empty:
                if has_default:
                    continue
                raise UntypedParameterError(cls, name)

            if is_optional_type(annotation):
                inner = extract_optional_inner_type(annotation)
                if not is_primitive_type(inner) and self._can_resolve(inner):
                    kwargs[name] = self.get(inner, cls, name, chain)
                elif not has_default:
                    kwargs[name] = None
                continue

            if is_primitive_type(annotation) or (has_default and not self._can_resolve(annotation)):
                if has_default:
                    continue
                raise DependencyResolutionError(
                    annotation,
                    f"Cannot resolve primitive parameter '{name}' of {class_name}",
                    cls,
                    name,
                )

            kwargs[name] = self.get(annotation, cls, name, chain)

        try:
            instance = cls(**kwargs)
        except Exception as e:
            logger.error("Failed to instantiate %s with resolved dependencies: %s", class_name, e)
            raise InstantiationError(
                cls, f"Failed to instantiate {class_name}: {str(e)}", cause=e
            ) from e
        logger.debug("Successfully created instance of %s", class_name)
        return instance

    def _can_resolve(self, cls: Any) -> bool:
        if self.is_registered(cls):
            return True
        return inspect.isclass(cls) and not inspect.isabstract(cls) and is_injectable(cls)

    def clear(self) -> None:
        """Clear all registrations."""
        with self._lock:
            self._singletons.clear()
            self._singleton_factories.clear()
            self._factories.clear()
            self._instances.clear()
        logger.debug("Cleared all registrations")


# Process-wide container handle. Created once on first access by
# get_container(); reset_container() discards it (tests, reconfiguration).
_container: Optional[DIContainer] = None
_container_lock = threading.Lock()


def get_container() -> DIContainer:
    """Get the process-wide container instance, creating it on first use."""
    global _container
    if _container is None:
        with _container_lock:
            if _container is None:
                _container = DIContainer()
    return _container


def reset_container() -> None:
    """Reset the process-wide container instance."""
    global _container
    with _container_lock:
        if _container is not None:
            _container.clear()
        _container = None
