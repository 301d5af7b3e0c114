"""Dependency injection exceptions."""
from typing import Any, List, Optional, Type


def _type_name(cls: Any) -> str:
    return cls.__name__ if hasattr(cls, "__name__") else str(cls)


class DependencyResolutionError(Exception):
    """Raised when a dependency cannot be resolved."""

    def __init__(
        self,
        dependency_type: Any,
        message: str,
        parent_type: Optional[Type] = None,
        parameter_name: Optional[str] = None,
        cause: Optional[Exception] = None,
    ):
        self.dependency_type = dependency_type
        self.parent_type = parent_type
        self.parameter_name = parameter_name
        self.cause = cause
        context = ""
        if parent_type is not None:
            context = f" (required by {_type_name(parent_type)}"
            if parameter_name:
                context += f" parameter '{parameter_name}'"
            context += ")"
        super().__init__(f"{message}{context}")


class UnregisteredDependencyError(DependencyResolutionError):
    """Raised when an abstract or unknown type has no registration."""

    def __init__(
        self,
        dependency_type: Any,
        parent_type: Optional[Type] = None,
        parameter_name: Optional[str] = None,
    ):
        super().__init__(
            dependency_type,
            f"No registration found for {_type_name(dependency_type)}",
            parent_type,
            parameter_name,
        )


class UntypedParameterError(DependencyResolutionError):
    """Raised when a constructor parameter has no annotation and no default."""

    def __init__(self, dependency_type: Type, parameter_name: str):
        super().__init__(
            dependency_type,
            f"Cannot resolve untyped parameter '{parameter_name}' of {_type_name(dependency_type)}",
            parameter_name=parameter_name,
        )


class CircularDependencyError(DependencyResolutionError):
    """Raised when resolving a type requires itself."""

    def __init__(self, chain: List[Any]):
        self.chain = chain
        super().__init__(
            chain[-1],
            "Circular dependency detected: " + " -> ".join(_type_name(c) for c in chain),
        )


class InstantiationError(DependencyResolutionError):
    """Raised when a resolved type fails to construct."""

    def __init__(self, dependency_type: Type, message: str, cause: Optional[Exception] = None):
        super().__init__(dependency_type, message, cause=cause)


class FactoryError(DependencyResolutionError):
    """Raised when a registered factory fails."""

    def __init__(self, dependency_type: Type, message: str, cause: Optional[Exception] = None):
        super().__init__(dependency_type, message, cause=cause)
