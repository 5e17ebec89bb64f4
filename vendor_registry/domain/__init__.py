"""Domain package — all ORM models are imported here so Alembic autogenerate detects them.

Folder intent:
  vendor.py  — Vendor table and the PartnerType enumeration
"""

from vendor_registry.domain.vendor import PartnerType, Vendor

__all__ = [
    "PartnerType",
    "Vendor",
]
