"""
Application package initializer.

The dashboard backend is organised into a few small layers: ``core``
holds configuration, logging and the in‑memory store, ``schemas``
holds the pydantic models exchanged with clients, ``services`` is the
façade the HTTP layer talks to, and ``api/v1`` exposes the routers.
"""

from .main import app, create_app  # noqa: F401
