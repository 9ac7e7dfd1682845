"""Pytest configuration and shared fixtures."""

import pytest

from tests.helpers import FakeBackend, FakeEnvironment


@pytest.fixture
def fake_env():
    return FakeEnvironment


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def view(backend):
    return backend.create_view()
