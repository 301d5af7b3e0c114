from shopfront.infrastructure.di.container import get_container
from shopfront.infrastructure.patterns.singleton_access import get_singleton
from shopfront.infrastructure.patterns.singleton_registry import SingletonRegistry


class Counter:
    created = 0

    def __init__(self, start: int = 0):
        Counter.created += 1
        self.value = start


def test_registry_is_singleton():
    assert SingletonRegistry.get_instance() is SingletonRegistry.get_instance()


def test_registry_creates_instance_once():
    # Arrange
    registry = SingletonRegistry.get_instance()
    Counter.created = 0

    # Act
    first = registry.get(Counter, 5)
    second = registry.get(Counter, 99)

    # Assert
    assert first is second
    assert first.value == 5
    assert Counter.created == 1


def test_register_pre_created_instance():
    registry = SingletonRegistry.get_instance()
    counter = Counter(3)

    registry.register(Counter, counter)

    assert registry.has(Counter)
    assert registry.get(Counter) is counter


def test_reset_instance_discards_instances():
    registry = SingletonRegistry.get_instance()
    first = registry.get(Counter)

    SingletonRegistry.reset_instance()

    assert SingletonRegistry.get_instance() is not registry
    assert SingletonRegistry.get_instance().get(Counter) is not first


def test_get_singleton_uses_registry():
    assert get_singleton(Counter, 1) is get_singleton(Counter)


def test_get_singleton_prefers_container():
    counter = Counter(42)
    get_container().register_instance(Counter, counter)

    assert get_singleton(Counter) is counter
    assert not SingletonRegistry.get_instance().has(Counter)
