"""Shared async HTTP transport for the third-party APIs the commands front.

Retry strategy
--------------
- 5xx responses and network errors (ConnectError, TimeoutException, ReadError)
  are retried with tenacity: ``settings.http_max_attempts`` attempts,
  exponential backoff capped at 10s.
- 4xx responses are not retried.
- Once retries are exhausted every httpx failure surfaces as UpstreamError,
  which routers turn into their plain-text error messages.
"""
from __future__ import annotations

import logging
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError
from tenacity import (
    AsyncRetrying,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from chatcmd.config import Settings

logger = logging.getLogger(__name__)


class UpstreamError(Exception):
    """Raised when a third-party API cannot be reached or answers badly."""


def _is_retryable(exc: BaseException) -> bool:
    if isinstance(exc, httpx.HTTPStatusError):
        return exc.response.status_code >= 500
    return isinstance(exc, (httpx.ConnectError, httpx.TimeoutException, httpx.ReadError))


class UpstreamClient:
    """Async JSON-over-HTTP client with retries.

    Intended to be used as an async context manager so that the underlying
    httpx.AsyncClient is always properly closed::

        async with SteamClient(settings) as client:
            servers = await client.servers(r"\\name_match\\*")
    """

    def __init__(self, settings: Settings, base_url: str = "") -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=httpx.Timeout(settings.http_timeout_seconds),
            follow_redirects=True,
        )
        self._max_attempts = max(1, settings.http_max_attempts)
        self._backoff = settings.http_retry_backoff

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _get_json(self, url: str, params: dict[str, Any] | None = None) -> Any:
        """GET *url* and decode the JSON body.

        Raises:
            UpstreamError: Network failure, non-2xx status after retries, or
                a body that is not JSON.
        """
        try:
            async for attempt in AsyncRetrying(
                stop=stop_after_attempt(self._max_attempts),
                wait=wait_exponential(multiplier=self._backoff, max=10),
                retry=retry_if_exception(_is_retryable),
                reraise=True,
            ):
                with attempt:
                    response = await self._client.get(url, params=params)
                    response.raise_for_status()
        except httpx.HTTPError as exc:
            logger.error("Upstream request to %s failed: %s", url, exc)
            raise UpstreamError(str(exc)) from exc

        try:
            return response.json()
        except ValueError as exc:
            logger.error("Upstream response from %s is not JSON: %s", url, exc)
            raise UpstreamError(f"Invalid JSON from {url}") from exc


ModelT = TypeVar("ModelT", bound=BaseModel)


def parse_body(model: type[ModelT], body: Any) -> ModelT:
    """Validate a decoded JSON body, mapping schema mismatches to UpstreamError."""
    try:
        return model.model_validate(body)
    except ValidationError as exc:
        logger.error("Unexpected %s payload: %s", model.__name__, exc)
        raise UpstreamError(f"Unexpected {model.__name__} payload") from exc
