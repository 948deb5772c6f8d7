"""
Shared base model for dashboard schemas.

Fields are declared in snake_case and exposed to clients in camelCase
(``user_id`` → ``userId``).  Either spelling is accepted on input.
"""

from typing import ClassVar, FrozenSet

from pydantic import BaseModel, model_validator
from pydantic.alias_generators import to_camel


DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"
TIME_PATTERN = r"^\d{2}:\d{2}$"


class DashboardModel(BaseModel):
    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "from_attributes": True,
    }


class PartialUpdate(DashboardModel):
    """Base for partial update payloads.

    Every field may be omitted.  A field sent as ``null`` is rejected
    unless it is listed in ``nullable_fields``, in which case the stored
    value is cleared.
    """

    nullable_fields: ClassVar[FrozenSet[str]] = frozenset()

    @model_validator(mode="after")
    def reject_nulls(self):
        for name in self.model_fields_set:
            if getattr(self, name) is None and name not in self.nullable_fields:
                raise ValueError(f"{to_camel(name)} may not be null")
        return self


class DeleteResult(DashboardModel):
    """Response body for successful deletes."""

    success: bool = True
