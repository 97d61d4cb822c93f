"""Dependency injection container."""

from typing import Any, Callable, Optional
import logging

from .config import ContainerConfig
from .definitions import ProtectedDefinition, SharedDefinition
from .exceptions import InvalidCallableError, NotFoundError

logger = logging.getLogger(__name__)


class Container:
    """Keyed registry of parameters and service definitions.

    Stored callables are service definitions: ``get`` invokes them with
    the container and returns the result. Anything else is a parameter
    and comes back unchanged.

    Usage:
        container = Container()
        container.set("dsn", "sqlite:///app.db")
        container.share("db", lambda c: Database(c.get("dsn")))
        container.protect("now", time.time)

        db = container.get("db")  # built once, same object afterwards
        clock = container.get("now")  # the function itself
    """

    def __init__(self, config: Optional[ContainerConfig] = None):
        self.config = config or ContainerConfig()
        self._entries: dict[str, Any] = {}

    @classmethod
    def from_config(cls, config: ContainerConfig) -> "Container":
        """Create a container seeded with the configured parameters."""
        container = cls(config)
        for key, value in config.parameters.items():
            container.set(key, value)
        return container

    def has(self, key: str) -> bool:
        """Check if a parameter or service is defined."""
        return key in self._entries

    def get(self, key: str) -> Any:
        """Get a parameter or a resolved service.

        Args:
            key: The unique identifier

        Returns:
            The result of calling the stored value with this container if it
            is callable, otherwise the stored value itself

        Raises:
            NotFoundError: If the identifier is not defined
        """
        value = self.raw(key)
        return value(self) if callable(value) else value

    def raw(self, key: str) -> Any:
        """Get a parameter or the callable defining a service, unevaluated.

        Raises:
            NotFoundError: If the identifier is not defined
        """
        if key not in self._entries:
            raise NotFoundError(key)
        return self._entries[key]

    def set(self, key: str, value: Any) -> "Container":
        """Set a parameter or a service definition, replacing any prior entry."""
        self._entries[key] = value
        logger.debug(f"Set entry: {key}")
        return self

    def unset(self, key: str) -> "Container":
        """Remove an entry. Unknown identifiers are ignored."""
        self._entries.pop(key, None)
        return self

    def share(self, key: str, factory: Callable[["Container"], Any]) -> "Container":
        """Register a service whose factory runs at most once.

        Where the result is remembered depends on ``config.share_scope``:
        per registration by default, or on the factory object itself so
        every registration of the same factory sees one result.

        Args:
            key: The unique identifier
            factory: Callable taking the container and returning the service

        Raises:
            InvalidCallableError: If factory is not callable
        """
        if not callable(factory):
            raise InvalidCallableError(factory)
        return self.set(key, SharedDefinition(factory, scope=self.config.share_scope))

    def protect(self, key: str, factory: Callable) -> "Container":
        """Store a callable as a parameter so ``get`` returns it uncalled.

        Raises:
            InvalidCallableError: If factory is not callable
        """
        if not callable(factory):
            raise InvalidCallableError(factory)
        return self.set(key, ProtectedDefinition(factory))

    def keys(self) -> list[str]:
        """Defined identifiers, in insertion order."""
        return list(self._entries)

    def __contains__(self, key: str) -> bool:
        return self.has(key)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"Container(entries={len(self._entries)}, share_scope={self.config.share_scope.value})"
