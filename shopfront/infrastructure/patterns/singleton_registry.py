"""Registry holding one shared instance per class."""
import threading
from typing import Any, Dict, Optional, Type, TypeVar

from shopfront.infrastructure.logging.logger import get_logger

T = TypeVar("T")
logger = get_logger(__name__)


class SingletonRegistry:
    """
    Registry of shared instances, keyed by class.

    The registry itself is a singleton: use ``SingletonRegistry.get_instance()``.
    Each class gets exactly one instance, created on its first ``get`` with
    the arguments of that call; later arguments are ignored.
    """

    _instance: Optional["SingletonRegistry"] = None
    _class_lock = threading.Lock()

    def __init__(self):
        self._instances: Dict[Type, Any] = {}
        self._lock = threading.RLock()

    @classmethod
    def get_instance(cls) -> "SingletonRegistry":
        """Get the registry instance, creating it on first use."""
        if cls._instance is None:
            with cls._class_lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Discard the registry and every instance it holds."""
        with cls._class_lock:
            if cls._instance is not None:
                cls._instance.clear()
            cls._instance = None

    def get(self, singleton_class: Type[T], *args: Any, **kwargs: Any) -> T:
        """Get the shared instance of a class, creating it if needed."""
        with self._lock:
            if singleton_class not in self._instances:
                self._instances[singleton_class] = singleton_class(*args, **kwargs)
                logger.debug("Created singleton instance of %s", singleton_class.__name__)
            return self._instances[singleton_class]

    def register(self, singleton_class: Type[T], instance: T) -> None:
        """Register a pre-created instance for a class."""
        with self._lock:
            self._instances[singleton_class] = instance

    def has(self, singleton_class: Type) -> bool:
        return singleton_class in self._instances

    def clear(self) -> None:
        with self._lock:
            self._instances.clear()
