import asyncio
import logging
from urllib.parse import quote
from typing import Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from app import config
from app.errors import (
    NetworkFailure,
    Result,
    Success,
    UnknownFailure,
    UpstreamError,
    UpstreamTimeout,
)
from app.models import (
    BreedListResult,
    BreedPicsResult,
    DogApiListPayload,
    DogApiPicsPayload,
)

logger = logging.getLogger("dog-proxy.upstream")

P = TypeVar("P", bound=BaseModel)


class DogApiClient:
    """Client for the Dog CEO API.

    Every call issues exactly one GET and resolves to ``Success`` or one of
    the ``OperationError`` variants. Expected failures are never raised.
    """

    def __init__(
        self,
        base_url: str = config.DOG_API_BASE_URL,
        timeout: float = config.UPSTREAM_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    async def fetch_breed_pics(self, breed: str) -> Result[BreedPicsResult]:
        # one path segment per breed part; "?" and "#" must not end the path
        path = quote(breed, safe="/")
        result = await self._get_payload(f"{self.base_url}/{path}/images", DogApiPicsPayload)
        if isinstance(result, Success):
            return Success(BreedPicsResult(data=result.value.message))
        return result

    async def fetch_breed_list(self) -> Result[BreedListResult]:
        result = await self._get_payload(f"{self.base_url}/breeds/list/all", DogApiListPayload)
        if isinstance(result, Success):
            return Success(BreedListResult(data=result.value.message))
        return result

    async def _get_payload(self, url: str, payload_type: Type[P]) -> Result[P]:
        try:
            async with httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                follow_redirects=True,
                transport=self._transport,
            ) as client:
                # wait_for cancels the in-flight request when the deadline passes
                response = await asyncio.wait_for(client.get(url), timeout=self.timeout)
        except (asyncio.TimeoutError, httpx.TimeoutException):
            logger.warning(
                "Upstream timed out",
                extra={"upstream_url": url, "error_kind": "timeout"},
            )
            return UpstreamTimeout()
        except httpx.TransportError as exc:
            logger.warning(
                "Upstream unreachable",
                extra={"upstream_url": url, "error_kind": "network", "error": str(exc)},
            )
            return NetworkFailure(str(exc) or "Unknown network error")
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.error(
                "Upstream call failed",
                extra={"upstream_url": url, "error_kind": "unknown", "error": str(exc)},
            )
            return UnknownFailure()

        if not response.is_success:
            logger.warning(
                "Upstream returned error status",
                extra={
                    "upstream_url": url,
                    "error_kind": "upstream",
                    "status_code": response.status_code,
                },
            )
            return UpstreamError(response.status_code)

        try:
            payload = payload_type.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            logger.error(
                "Unexpected upstream body",
                extra={"upstream_url": url, "error_kind": "unknown", "error": str(exc)},
            )
            return UnknownFailure()

        logger.debug("Upstream call succeeded", extra={"upstream_url": url})
        return Success(payload)
