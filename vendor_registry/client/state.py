"""Client-side vendor state: the current list plus loading and error flags.

One :class:`VendorState` is owned by each view/session. Every mutation goes
through the HTTP client and then re-fetches the whole list. Failures are
reduced to one generic message per operation on ``error``; the underlying
exception is logged, never shown.
"""

from __future__ import annotations

import logging
from typing import Protocol

from vendor_registry.schemas.vendor import VendorCreate, VendorOut

logger = logging.getLogger(__name__)

LOAD_ERROR = "Failed to load vendors. Please try again later."
ADD_ERROR = "Failed to add vendor. Please try again later."
DELETE_ERROR = "Failed to delete vendor. Please try again later."
CHECK_EMAIL_ERROR = "Failed to check email. Please try again later."


class VendorBackend(Protocol):
    """What the state needs from a client (VendorClient satisfies this)."""

    async def get_vendors(self) -> list[VendorOut]: ...

    async def create_vendor(self, vendor: VendorCreate) -> VendorOut: ...

    async def delete_vendor(self, vendor_id: int) -> None: ...

    async def check_email_exists(self, email: str) -> bool: ...


class VendorState:
    def __init__(self, client: VendorBackend):
        self._client = client
        self.vendors: list[VendorOut] = []
        self.loading: bool = False
        self.error: str | None = None

    async def refresh(self) -> None:
        """Re-fetch the list, newest first. Never raises."""
        self.loading = True
        self.error = None
        try:
            fetched = await self._client.get_vendors()
            self.vendors = list(reversed(fetched))
        except Exception:
            self.error = LOAD_ERROR
            logger.exception("Loading vendors failed")
        finally:
            self.loading = False

    async def add(self, vendor: VendorCreate) -> None:
        self.loading = True
        self.error = None
        try:
            await self._client.create_vendor(vendor)
            await self.refresh()
        except Exception:
            self.error = ADD_ERROR
            logger.exception("Adding vendor %s failed", vendor.email)
            raise
        finally:
            self.loading = False

    async def remove(self, vendor_id: int) -> None:
        self.loading = True
        self.error = None
        try:
            await self._client.delete_vendor(vendor_id)
            await self.refresh()
        except Exception:
            self.error = DELETE_ERROR
            logger.exception("Deleting vendor %s failed", vendor_id)
            raise
        finally:
            self.loading = False

    async def check_email_exists(self, email: str) -> bool:
        try:
            return await self._client.check_email_exists(email)
        except Exception:
            self.error = CHECK_EMAIL_ERROR
            logger.exception("Checking email %s failed", email)
            raise
