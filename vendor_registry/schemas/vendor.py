"""Vendor Pydantic schemas (request DTOs and response models)."""


from vendor_registry.schemas.common import ApiModel

class VendorCreate(ApiModel):
    # All optional here: presence and partner_type are checked by VendorService
    # so that a missing field is a 400 with a readable message, not a 422.
    name: str | None = None
    contact_person: str | None = None
    email: str | None = None
    partner_type: str | None = None

class VendorOut(ApiModel):
    id: int
    name: str
    contact_person: str
    email: str
    partner_type: str

class EmailCheckResponse(ApiModel):
    exists: bool
