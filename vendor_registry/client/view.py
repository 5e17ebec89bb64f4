"""Plain-text vendor list bound to a VendorState."""

from __future__ import annotations

from collections.abc import Callable

from vendor_registry.client.state import VendorState

TITLE = "Vendor List"
LOADING_TEXT = "Loading vendors..."
EMPTY_TEXT = "No vendors found"
DELETE_LABEL = "Delete"
CONFIRM_DELETE = "Are you sure you want to delete this vendor?"
COLUMNS = ("ID", "Name", "Contact Person", "Email", "Partner Type", "Actions")


class VendorListView:
    def __init__(self, state: VendorState, confirm: Callable[[str], bool]):
        self.state = state
        self._confirm = confirm

    async def mount(self) -> None:
        await self.state.refresh()

    async def delete(self, vendor_id: int) -> bool:
        """Remove a vendor after confirmation. Returns whether it was attempted."""
        if not self._confirm(CONFIRM_DELETE):
            return False
        await self.state.remove(vendor_id)
        return True

    @property
    def shows_table(self) -> bool:
        return not self.state.loading and not self.state.error and bool(self.state.vendors)

    def rows(self) -> list[tuple[str, ...]]:
        return [
            (str(v.id), v.name, v.contact_person, v.email, v.partner_type, DELETE_LABEL)
            for v in self.state.vendors
        ]

    def render(self) -> str:
        lines = [TITLE, "=" * len(TITLE)]
        if self.state.loading:
            lines.append(LOADING_TEXT)
        elif self.state.error:
            lines.append(self.state.error)
        elif not self.state.vendors:
            lines.append(EMPTY_TEXT)
        else:
            lines.extend(_table(COLUMNS, self.rows()))
        return "\n".join(lines)


def _table(header: tuple[str, ...], rows: list[tuple[str, ...]]) -> list[str]:
    widths = [max(len(cell) for cell in col) for col in zip(header, *rows)]

    def fmt(cells: tuple[str, ...]) -> str:
        return " | ".join(cell.ljust(w) for cell, w in zip(cells, widths)).rstrip()

    rule = "-+-".join("-" * w for w in widths)
    return [fmt(header), rule, *(fmt(r) for r in rows)]
