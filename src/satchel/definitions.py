"""Wrappers that change how a stored callable is resolved.

A plain callable stored in the container is a service definition and is
invoked on every ``get``. The two wrappers here are the alternatives:

- ``SharedDefinition`` runs the factory once and hands back the same
  result afterwards.
- ``ProtectedDefinition`` never runs it, so the callable itself comes
  back as a parameter.
"""

import inspect
import logging
from enum import Enum
from typing import Any, Callable

logger = logging.getLogger(__name__)

# Attribute set on the factory object under ShareScope.FACTORY
FACTORY_MARKER = "_satchel_shared_result"

_MISSING = object()


class ShareScope(Enum):
    """Where a shared factory's result is remembered."""
    ENTRY = "entry"  # on the wrapper, one result per registration
    FACTORY = "factory"  # on the factory object, shared by every registration of it


class SharedDefinition:
    """Memoizing wrapper around a factory.
    
    Attributes:
        factory: The wrapped callable, invoked with the container
        scope: Where the computed result is stored
    """
    
    def __init__(self, factory: Callable[[Any], Any], scope: ShareScope = ShareScope.ENTRY):
        self.factory = factory
        self.scope = scope
        self._result = _MISSING
        
        if scope == ShareScope.FACTORY and not _accepts_marker(factory):
            logger.warning(
                f"Cannot attach shared result to {factory!r}; "
                f"falling back to entry scope"
            )
            self.scope = ShareScope.ENTRY
    
    @property
    def resolved(self) -> bool:
        """Whether the factory has already produced its result."""
        return self._cached() is not _MISSING
    
    def __call__(self, container: Any) -> Any:
        result = self._cached()
        if result is not _MISSING:
            return result
        
        result = self.factory(container)
        if self.scope == ShareScope.FACTORY and not self._mark_factory(result):
            logger.warning(
                f"Cannot attach shared result to {self.factory!r}; "
                f"falling back to entry scope"
            )
            self.scope = ShareScope.ENTRY
        if self.scope == ShareScope.ENTRY:
            self._result = result
        logger.debug(f"Shared factory {_name(self.factory)} resolved")
        return result
    
    def _mark_factory(self, result: Any) -> bool:
        """Store the result on the factory; False if the factory refuses it."""
        try:
            setattr(self.factory, FACTORY_MARKER, result)
        except (AttributeError, TypeError):
            return False
        # A custom __setattr__ may accept the value without keeping it
        return FACTORY_MARKER in vars(self.factory)
    
    def _cached(self) -> Any:
        if self.scope == ShareScope.FACTORY:
            # Own instance state only, never __getattr__ or class attributes
            return vars(self.factory).get(FACTORY_MARKER, _MISSING)
        return self._result
    
    def __repr__(self) -> str:
        return f"SharedDefinition({_name(self.factory)}, scope={self.scope.value})"


class ProtectedDefinition:
    """Wrapper that returns the protected callable instead of calling it."""
    
    def __init__(self, factory: Callable):
        self.factory = factory
    
    def __call__(self, *args, **kwargs) -> Callable:
        return self.factory
    
    def __repr__(self) -> str:
        return f"ProtectedDefinition({_name(self.factory)})"


def _accepts_marker(factory: Callable) -> bool:
    """Check that an attribute can be stored on the factory object."""
    # Bound methods proxy __dict__ to their function but refuse setattr.
    # Classes are excluded: the attribute would leak into subclasses.
    if inspect.ismethod(factory):
        return False
    return isinstance(getattr(factory, "__dict__", None), dict)


def _name(factory: Callable) -> str:
    return getattr(factory, "__qualname__", None) or repr(factory)
