"""httpx wrapper.

Why a wrapper:
- Standardises TLS verification, timeouts and redirects in one place.
- Makes testing easy: respx patches the transport under `httpx.AsyncClient`.
"""

from __future__ import annotations

import logging

import httpx

from core.config import AppSettings
from core.domain.models import ApiRequest, ApiResponse

_LOGGER = logging.getLogger(__name__)


def build_async_client(settings: AppSettings) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` for a single request.

    - `verify` follows `settings.verify_tls` (off unless explicitly enabled).
    - No timeout unless `API_TIMEOUT_SECONDS` is set.
    - Redirects are followed.
    """

    if not settings.verify_tls:
        _LOGGER.warning("TLS certificate verification is disabled")
    return httpx.AsyncClient(
        verify=settings.verify_tls,
        timeout=httpx.Timeout(settings.timeout_seconds),
        follow_redirects=True,
    )


async def send_request(request: ApiRequest, settings: AppSettings) -> ApiResponse:
    """Send `request` once and read the full body.

    Transport errors (`httpx.HTTPError`) propagate; there is no retry.
    """

    _LOGGER.info("Sending %s %s", request.method, request.url)
    async with build_async_client(settings) as client:
        response = await client.request(request.method, request.url, headers=request.headers)
        body = response.text

    _LOGGER.info("Received HTTP %s (%d bytes)", response.status_code, len(response.content))
    return ApiResponse(
        status_code=response.status_code,
        reason=response.reason_phrase,
        body=body,
    )
