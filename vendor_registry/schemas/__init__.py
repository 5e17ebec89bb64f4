"""Pydantic schemas package.

Folder intent:
  common.py  — ApiModel base, ErrorResponse, HealthResponse
  vendor.py  — vendor request/response bodies (shared by the API and the HTTP client)
"""
