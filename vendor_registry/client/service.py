"""Async HTTP client for the vendor API.

Thin wrapper over :class:`httpx.AsyncClient`: one method per endpoint, JSON
bodies validated into the same schemas the API serves. Any non-2xx response
raises :class:`VendorApiError` carrying the API's ``error`` message.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from vendor_registry.core.config import settings
from vendor_registry.schemas.vendor import VendorCreate, VendorOut

logger = logging.getLogger(__name__)


class VendorApiError(Exception):
    """The vendor API answered with a non-2xx status."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"{status_code}: {message}")


class VendorClient:
    def __init__(
        self,
        base_url: str | None = None,
        *,
        http: httpx.AsyncClient | None = None,
    ):
        self._base_url = (base_url or settings.vendors_url).rstrip("/")
        self._owns_http = http is None
        self._http = http or httpx.AsyncClient()

    @property
    def base_url(self) -> str:
        return self._base_url

    async def __aenter__(self) -> "VendorClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    # ------------------------------------------------------------------
    # Endpoints
    # ------------------------------------------------------------------

    async def get_vendors(self) -> list[VendorOut]:
        response = await self._http.get(self._base_url)
        _raise_for_status(response)
        return [VendorOut.model_validate(item) for item in response.json()]

    async def create_vendor(self, vendor: VendorCreate) -> VendorOut:
        response = await self._http.post(
            self._base_url, json=vendor.model_dump(exclude_none=True)
        )
        _raise_for_status(response)
        return VendorOut.model_validate(response.json())

    async def delete_vendor(self, vendor_id: int) -> None:
        response = await self._http.delete(f"{self._base_url}/{vendor_id}")
        _raise_for_status(response)

    async def check_email_exists(self, email: str) -> bool:
        response = await self._http.get(
            f"{self._base_url}/check-email", params={"email": email}
        )
        _raise_for_status(response)
        return bool(response.json()["exists"])


def _raise_for_status(response: httpx.Response) -> None:
    if response.is_success:
        return
    message = response.reason_phrase or "Request failed"
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("error"):
        message = str(body["error"])
    logger.debug(
        "%s %s -> %s: %s",
        response.request.method, response.request.url, response.status_code, message,
    )
    raise VendorApiError(response.status_code, message)
