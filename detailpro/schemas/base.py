"""
Shared base for partial-update schemas.
"""
from pydantic import BaseModel, ConfigDict, model_validator
from typing import ClassVar, Tuple


class UpdateSchema(BaseModel):
    """
    Partial update. Omitted fields are left alone and unknown fields are
    rejected. Fields named in ``required_fields`` may be omitted but not
    sent as null, since the stored column cannot hold one.
    """
    required_fields: ClassVar[Tuple[str, ...]] = ()

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def reject_null_required(self):
        nulls = [
            field for field in self.required_fields
            if field in self.model_fields_set and getattr(self, field) is None
        ]
        if nulls:
            raise ValueError(f"{', '.join(nulls)} cannot be null")
        return self
