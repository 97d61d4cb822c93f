"""satchel: a small dependency injection container.

Stores parameters and service factories under string identifiers and
resolves factories lazily on ``get``.

Usage:
    from satchel import Container

    container = Container()
    container.set("greeting", "hello")
    container.share("greeter", lambda c: Greeter(c.get("greeting")))

    greeter = container.get("greeter")
"""

__version__ = "0.1.0"

from .config import ContainerConfig
from .container import Container
from .definitions import ProtectedDefinition, SharedDefinition, ShareScope
from .diagnostics import EntryInfo, describe, format_entries
from .exceptions import ContainerError, InvalidCallableError, NotFoundError

__all__ = [
    "Container",
    "ContainerConfig",
    "ContainerError",
    "EntryInfo",
    "InvalidCallableError",
    "NotFoundError",
    "ProtectedDefinition",
    "SharedDefinition",
    "ShareScope",
    "describe",
    "format_entries",
]
