"""
Chaos API Client

Forwards one tool call to the hosted Chaos MCP edge function as a single
JSON-RPC request and folds every outcome into a CallToolResult-shaped dict.

Notes:
- call_tool never raises; failures come back with isError=True and one
  text block describing what went wrong.
- One attempt per call. No retries.
"""

import asyncio
import itertools
import logging
import threading
from typing import Any, Dict, Optional

import httpx

from .base import error_result
from .config import API_ENDPOINT

logger = logging.getLogger(__name__)

TIMEOUT_SECONDS = 30.0
JSONRPC_VERSION = "2.0"


class ChaosApiClient:
    """
    HTTP client for the Chaos MCP edge function.

    A single instance is shared by every tool handler. The only mutable
    state is the request id counter.
    """

    def __init__(
        self,
        api_key: str,
        endpoint: str = API_ENDPOINT,
        timeout: float = TIMEOUT_SECONDS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._api_key = api_key
        self.endpoint = endpoint
        self.timeout = timeout
        self._ids = itertools.count(1)
        self._id_lock = threading.Lock()
        self._http = httpx.AsyncClient(transport=transport, timeout=timeout)

    async def __aenter__(self) -> "ChaosApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    def _next_id(self) -> int:
        with self._id_lock:
            return next(self._ids)

    async def call_tool(self, tool_name: str, arguments: Dict[str, Any]) -> Dict[str, Any]:
        """Invoke a remote tool and return a normalized result."""
        request_id = self._next_id()
        payload = {
            "jsonrpc": JSONRPC_VERSION,
            "id": request_id,
            "method": "tools/call",
            "params": {"name": tool_name, "arguments": arguments},
        }
        logger.info(f"tools/call {tool_name} (id={request_id})")

        try:
            response = await asyncio.wait_for(self._post(payload), timeout=self.timeout)
        except (asyncio.TimeoutError, httpx.TimeoutException):
            logger.warning(f"tools/call {tool_name} (id={request_id}) timed out")
            return error_result(f"Request timed out after {self.timeout:g} seconds.")
        except httpx.RequestError as e:
            logger.warning(f"tools/call {tool_name} (id={request_id}) network error: {e}")
            return error_result(f"Network error: {str(e) or 'Check your internet connection.'}")
        except Exception as e:
            logger.exception(f"Unexpected error calling {tool_name} (id={request_id})")
            return error_result(f"Network error: {str(e) or 'Check your internet connection.'}")

        return self._normalize(response, tool_name, request_id)

    async def _post(self, payload: Dict[str, Any]) -> httpx.Response:
        return await self._http.post(
            self.endpoint,
            json=payload,
            headers={
                "Content-Type": "application/json",
                "Authorization": f"Bearer {self._api_key}",
            },
        )

    def _normalize(self, response: httpx.Response, tool_name: str, request_id: int) -> Dict[str, Any]:
        if response.status_code == 401:
            logger.warning(f"tools/call {tool_name} (id={request_id}) rejected: 401")
            return error_result("Authentication failed. Check your CHAOS_API_KEY.")

        if not response.is_success:
            logger.warning(f"tools/call {tool_name} (id={request_id}) failed: HTTP {response.status_code}")
            return error_result(f"API request failed with status {response.status_code}")

        try:
            body = response.json()
        except ValueError:
            return error_result("Invalid JSON response from API")
        if not isinstance(body, dict):
            return error_result("Invalid JSON response from API")

        error = body.get("error")
        if error:
            message = error.get("message") if isinstance(error, dict) else str(error)
            logger.info(f"tools/call {tool_name} (id={request_id}) remote error: {message}")
            return error_result(message or "Unknown error")

        result = body.get("result")
        if not result:
            return error_result("Empty response from API")
        if not isinstance(result, dict):
            return error_result("Invalid JSON response from API")

        return result
