"""Vendor repository — the four statements the vendor API needs."""


from vendor_registry.domain.vendor import Vendor
from vendor_registry.repositories.base import BaseRepository


class VendorRepository(BaseRepository[Vendor]):
    model = Vendor
    # the only unique column besides the primary key
    unique_field = "email"

    async def email_exists(self, email: str) -> bool:
        return await self.count(email=email) > 0
