"""
Exception types shared by services and routers.

Validation errors are not defined here: request bodies and query
parameters are validated by pydantic, and the resulting
``RequestValidationError`` is rendered by a handler in ``main``.
"""


class NotFoundError(Exception):
    """The requested record or scope does not exist."""

    def __init__(self, kind: str, key: str) -> None:
        super().__init__(f"{kind} {key} not found")
        self.kind = kind
        self.key = key

    @property
    def detail(self) -> str:
        return f"{self.kind} not found"


class UpstreamIntegrationError(Exception):
    """An outbound call to a third‑party API failed."""
