from datetime import date
from typing import Optional, TypeVar, Generic, Any

from pydantic import BaseModel, ConfigDict, field_validator

T = TypeVar("T")
R = TypeVar("R", bound="RecordBase")


class DataResponse(BaseModel, Generic[T]):
    success: bool = True
    message: str = ''
    data: Optional[T] = None

    model_config = ConfigDict(arbitrary_types_allowed=True)

    def success_response(self, data: T):
        self.success = True
        self.message = 'Success'
        self.data = data
        return self


class RecordBase(BaseModel):
    """
    Immutable value record.

    Records compare by value and are hashable. Fields that were not provided
    are None, never the empty string.
    """
    model_config = ConfigDict(frozen=True)


def with_changes(record: R, **overrides: Any) -> R:
    """
    Return a copy of ``record`` with the given fields replaced.

    The result is validated again, so overrides go through the same
    coercion as a freshly constructed record.

    Raises:
        ValueError: if an override names a field the record does not have.
    """
    record_type = type(record)
    unknown = set(overrides) - set(record_type.model_fields)
    if unknown:
        raise ValueError(f"{record_type.__name__} has no field(s): {', '.join(sorted(unknown))}")
    values = record.model_dump()
    values.update(overrides)
    return record_type.model_validate(values)


class FormRequest(BaseModel):
    """Raw form input; blank date strings are accepted and read as absent."""

    @field_validator('*', mode='before')
    @classmethod
    def blank_date_to_none(cls, value, info):
        field = cls.model_fields.get(info.field_name)
        if field is not None and field.annotation in (date, Optional[date]):
            if isinstance(value, str) and not value.strip():
                return None
        return value
