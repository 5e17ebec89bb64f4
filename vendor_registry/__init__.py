"""Vendor Registry — vendor CRUD API plus the client that consumes it.

Folder intent:
  core/          — settings and the AppException hierarchy
  db/, domain/   — async SQLAlchemy engine and the vendors table
  repositories/  — SQL statements
  services/      — validation and business rules
  routers/       — FastAPI endpoints
  middleware/    — request logging
  client/        — HTTP client, client-side state, list view
  cli.py         — Typer entry point (serve + client commands)
"""

__version__ = "1.0.0"
