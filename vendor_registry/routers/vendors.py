"""Vendor router — list, create, delete, and email check under /vendors.

Pattern:
  1. Inject the DB session via Depends
  2. Instantiate the service with the session
  3. Parse HTTP input, call the service, shape the response
"""

from __future__ import annotations

import re
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from vendor_registry.core.exceptions import ValidationError
from vendor_registry.db.base import get_db
from vendor_registry.schemas.common import ErrorResponse
from vendor_registry.schemas.vendor import EmailCheckResponse, VendorCreate, VendorOut
from vendor_registry.services.vendor import VendorService

router = APIRouter(
    prefix="/vendors",
    tags=["Vendors"],
    responses={500: {"model": ErrorResponse}},
)

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


# ------------------------------------------------------------------
# Helpers
# ------------------------------------------------------------------

def _svc(session: AsyncSession) -> VendorService:
    return VendorService(session)


def _parse_vendor_id(raw: str) -> int:
    if not _INTEGER_RE.fullmatch(raw):
        raise ValidationError("Invalid vendor ID")
    return int(raw)


# ------------------------------------------------------------------
# Endpoints
# ------------------------------------------------------------------

@router.get("", response_model=list[VendorOut])
@router.get("/", response_model=list[VendorOut], include_in_schema=False)
async def list_vendors(session: AsyncSession = Depends(get_db)):
    """List all vendors in store order."""
    vendors = await _svc(session).list_vendors()
    return [VendorOut.model_validate(v) for v in vendors]


@router.post(
    "",
    response_model=VendorOut,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
@router.post(
    "/",
    response_model=VendorOut,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
async def create_vendor(
    body: Optional[VendorCreate] = None,
    session: AsyncSession = Depends(get_db),
):
    """Register a new vendor."""
    vendor = await _svc(session).create_vendor(body or VendorCreate())
    return VendorOut.model_validate(vendor)


@router.get(
    "/check-email",
    response_model=EmailCheckResponse,
    responses={400: {"model": ErrorResponse}},
)
async def check_email(
    email: Optional[str] = Query(default=None, description="Exact email to look up"),
    session: AsyncSession = Depends(get_db),
):
    exists = await _svc(session).email_exists(email)
    return EmailCheckResponse(exists=exists)


@router.delete(
    "/{vendor_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def delete_vendor(
    vendor_id: str,
    session: AsyncSession = Depends(get_db),
):
    await _svc(session).delete_vendor(_parse_vendor_id(vendor_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
