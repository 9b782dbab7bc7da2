from datetime import date
from typing import Optional

from pydantic import field_validator

from app.schemas.sche_base import RecordBase, FormRequest


class DateRange(RecordBase):
    """One continuous period of use. An absent start is unknown, an absent end is ongoing."""
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    @field_validator('start_date', 'end_date', mode='before')
    @classmethod
    def blank_date_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def __str__(self) -> str:
        start = self.start_date.isoformat() if self.start_date else 'Unknown Start'
        end = self.end_date.isoformat() if self.end_date else 'Present'
        return f"{start} to {end}"


class Medication(RecordBase):
    id: int = 0
    generic_name: str
    brand_name: Optional[str] = None
    dosage: Optional[str] = None
    dose_form: Optional[str] = None
    instructions: Optional[str] = None
    reason: Optional[str] = None
    prescriber: Optional[str] = None
    notes: Optional[str] = None
    start_date: Optional[date] = None
    manufacturer: Optional[str] = None


class MedicationCreateRequest(FormRequest):
    generic_name: Optional[str] = None
    brand_name: Optional[str] = None
    dosage: Optional[str] = None
    dose_form: Optional[str] = None
    instructions: Optional[str] = None
    reason: Optional[str] = None
    prescriber: Optional[str] = None
    notes: Optional[str] = None
    start_date: Optional[date] = None
    manufacturer: Optional[str] = None


class MedicationUpdateRequest(MedicationCreateRequest):
    pass
