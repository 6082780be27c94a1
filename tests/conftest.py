"""Shared fixtures: a fixed environment and a simulated Dog CEO upstream.

The upstream is an ``httpx.MockTransport`` so no test touches the network.
Route tests install it by overriding the ``get_dog_client`` dependency.
"""

import os

os.environ["SERVICE_NAME"] = "dog-proxy-test"
os.environ["ENVIRONMENT"] = "staging"
os.environ["DOG_API_BASE_URL"] = "https://dog.ceo/api"
os.environ["UPSTREAM_TIMEOUT_SECONDS"] = "10"

import httpx
import pytest
from fastapi.testclient import TestClient

from app.dog_client import DogApiClient
from app.main import app, get_dog_client


@pytest.fixture
def dog_client_factory():
    def _build(handler, timeout: float = 1.0) -> DogApiClient:
        return DogApiClient(
            base_url="https://dog.ceo/api",
            timeout=timeout,
            transport=httpx.MockTransport(handler),
        )

    return _build


@pytest.fixture
def use_upstream(dog_client_factory):
    """Route every request through the given upstream handler."""

    def _install(handler, timeout: float = 1.0) -> None:
        app.dependency_overrides[get_dog_client] = lambda: dog_client_factory(handler, timeout)

    yield _install
    app.dependency_overrides.clear()


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)
