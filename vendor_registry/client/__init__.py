"""Client side of the vendor feature.

Files:
  service.py  — VendorClient (httpx) and VendorApiError
  state.py    — VendorState: list, loading flag, error message
  view.py     — VendorListView: text rendering + delete confirmation
"""

from vendor_registry.client.service import VendorApiError, VendorClient
from vendor_registry.client.state import VendorState
from vendor_registry.client.view import VendorListView

__all__ = ["VendorApiError", "VendorClient", "VendorListView", "VendorState"]
