"""
Top‑level package for the Daily Dashboard API.

This file makes ``dashboard_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``dashboard_api.app.main``.  The HTTP client for the API lives in
``dashboard_api.client``.
"""

__all__ = []
