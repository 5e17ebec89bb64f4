"""HTTP middleware.

Files:
  request_log.py  — RequestLogMiddleware
"""
