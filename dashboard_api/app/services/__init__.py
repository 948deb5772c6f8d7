"""
Service layer abstraction.

Each service wraps one store collection and is the only thing the
HTTP routers call.  Services receive already validated pydantic
payloads, translate them into plain field mappings for the store and
return the store's result unchanged.  Absence is signalled with
``None``/``False``; ``require`` helpers raise ``NotFoundError``.
"""

from .dashboard import DashboardServices  # noqa: F401
