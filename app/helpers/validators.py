from typing import Any, Dict, Optional

from pydantic import BaseModel

from app.helpers.exception_handler import ValidationError


def clean_text(value: Optional[str]) -> Optional[str]:
    """Surrounding whitespace is dropped; blank text is read as absent."""
    if value is None or not value.strip():
        return None
    return value.strip()


def require_text(value: Optional[str], field: str) -> str:
    if value is None or not value.strip():
        raise ValidationError(field)
    return value.strip()


def clean_form(data: BaseModel, required_field: str) -> Dict[str, Any]:
    """
    Turn raw form input into record field values.

    The required field is stripped and must be non-blank; every other text
    field becomes None when blank.

    Raises:
        ValidationError: the required field is missing or blank.
    """
    values = data.model_dump()
    for field, value in values.items():
        if isinstance(value, str):
            values[field] = clean_text(value)
    values[required_field] = require_text(getattr(data, required_field), required_field)
    return values
