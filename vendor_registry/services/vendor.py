"""Vendor service — validation and business rules for the vendor API.

Rule: No FastAPI here. The service turns repository results and store errors
into AppException subclasses; the router only maps HTTP in and out.
"""


import logging

from sqlalchemy.ext.asyncio import AsyncSession

from vendor_registry.core.exceptions import (
    ConflictError,
    DuplicateKeyError,
    NotFoundError,
    ValidationError,
)
from vendor_registry.domain.vendor import PartnerType, Vendor
from vendor_registry.repositories.vendor import VendorRepository
from vendor_registry.schemas.vendor import VendorCreate

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "contact_person", "email", "partner_type")

MISSING_FIELDS_MESSAGE = "All fields are required"
PARTNER_TYPE_MESSAGE = 'partner_type must be either "Supplier" or "Partner"'
DUPLICATE_EMAIL_MESSAGE = (
    "A vendor with this email already exists. Please use a different email address."
)
MISSING_EMAIL_MESSAGE = "Email query parameter is required"
MAX_ID = 2**63 - 1

class VendorService:
    def __init__(self, session: AsyncSession):
        self._repo = VendorRepository(session)

    async def list_vendors(self) -> list[Vendor]:
        return await self._repo.list_all()

    async def create_vendor(self, data: VendorCreate) -> Vendor:
        values = data.model_dump(include=set(REQUIRED_FIELDS))
        if not all(values.get(field) for field in REQUIRED_FIELDS):
            raise ValidationError(MISSING_FIELDS_MESSAGE)
        try:
            PartnerType(values["partner_type"])
        except ValueError:
            raise ValidationError(PARTNER_TYPE_MESSAGE) from None

        try:
            vendor = await self._repo.create(**values)
        except DuplicateKeyError as exc:
            if exc.field != "email":
                raise
            raise ConflictError(DUPLICATE_EMAIL_MESSAGE) from exc
        logger.info("Created vendor %s (%s)", vendor.id, vendor.email)
        return vendor

    async def delete_vendor(self, vendor_id: int) -> None:
        # SQLite INTEGER is signed 64-bit; nothing outside it can be stored
        if not -MAX_ID <= vendor_id <= MAX_ID:
            raise NotFoundError("Vendor")
        deleted = await self._repo.delete(vendor_id)
        if not deleted:
            raise NotFoundError("Vendor")
        logger.info("Deleted vendor %s", vendor_id)

    async def email_exists(self, email: str | None) -> bool:
        if not email:
            raise ValidationError(MISSING_EMAIL_MESSAGE)
        return await self._repo.email_exists(email)
