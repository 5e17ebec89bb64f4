"""Routers package — HTTP endpoint definitions.

Files:
  vendors.py  — /api/vendors list, create, delete, check-email

Rule: Routers only handle HTTP (request parsing, response shaping).
      All business logic delegates to vendor_registry/services/.
"""
