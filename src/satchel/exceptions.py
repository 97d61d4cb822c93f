"""Errors raised by the container."""


class ContainerError(Exception):
    """Base class for all container errors."""


class NotFoundError(ContainerError, LookupError):
    """Raised when an identifier has no entry in the container."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f'Identifier "{key}" is not defined')


class InvalidCallableError(ContainerError, TypeError):
    """Raised when share() or protect() is given something that isn't callable."""

    def __init__(self, value: object):
        self.received_type = type(value).__name__
        super().__init__(f"Expected a callable; got: {self.received_type}")
