"""Shared fixtures for the proxy tests."""

import json
from typing import Callable, Dict, List

import httpx
import pytest

from chaos_mcp.client import ChaosApiClient

VALID_KEY = "chaos_" + "a1B2c3D4" * 4


@pytest.fixture
def api_key() -> str:
    return VALID_KEY


@pytest.fixture
def sent() -> List[Dict]:
    """JSON bodies of every request that reached the fake endpoint."""
    return []


@pytest.fixture
def make_client(api_key, sent) -> Callable[..., ChaosApiClient]:
    """
    Build a ChaosApiClient whose HTTP traffic goes to `handler`.

    The handler receives the httpx.Request and returns an httpx.Response
    (or raises, to simulate transport failures).
    """
    def factory(handler, timeout: float = 30.0) -> ChaosApiClient:
        def recording(request: httpx.Request):
            sent.append(json.loads(request.content))
            return handler(request)

        return ChaosApiClient(
            api_key,
            endpoint="https://api.test/functions/v1/chaos-mcp-server",
            timeout=timeout,
            transport=httpx.MockTransport(recording),
        )

    return factory
