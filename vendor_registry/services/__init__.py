"""Services package — all business logic lives here, never in routers.

Files:
  vendor.py  — VendorService (create/list/delete/email check rules)

Rule: routers call services, services call repositories, repositories call the DB.
      No SQLAlchemy queries in routers. No FastAPI imports in services.
"""
