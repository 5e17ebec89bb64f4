"""SQLAlchemy ORM model for Vendors.

A vendor is a supplier or partner company with one contact person. The store
assigns the integer id and enforces email uniqueness; ``partner_type`` is a
plain string column and is constrained to :class:`PartnerType` by the service.
"""

from __future__ import annotations

import enum

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from vendor_registry.db.base import Base


class PartnerType(str, enum.Enum):
    SUPPLIER = "Supplier"
    PARTNER = "Partner"


class Vendor(Base):
    __tablename__ = "vendors"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    contact_person: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    # "Supplier" | "Partner"
    partner_type: Mapped[str] = mapped_column(String(50), nullable=False)

    def __repr__(self) -> str:
        return f"<Vendor id={self.id} email={self.email!r}>"
