"""Repositories package — the only layer that issues SQL.

Files:
  base.py    — generic async CRUD + store error translation
  vendor.py  — VendorRepository
"""
