"""Pytest fixtures for satchel tests."""

import pytest

from satchel import Container, ContainerConfig, ShareScope


@pytest.fixture
def container():
    """Provide an empty container with default (entry) share scope."""
    return Container()


@pytest.fixture
def factory_scoped():
    """Provide a container that stores shared results on the factory."""
    return Container(ContainerConfig(share_scope=ShareScope.FACTORY))


class Service:
    """Plain object used as a factory product."""

    def __init__(self, name: str = "service"):
        self.name = name
