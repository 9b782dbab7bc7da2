from typing import Optional, Tuple, List

from app.schemas.sche_base import RecordBase, FormRequest
from app.schemas.sche_medication import DateRange


class PastMedication(RecordBase):
    id: int = 0
    generic_name: str
    brand_name: Optional[str] = None
    dosage: Optional[str] = None
    dose_form: Optional[str] = None
    instructions: Optional[str] = None
    reason: Optional[str] = None
    prescriber: Optional[str] = None
    history_notes: Optional[str] = None
    reason_for_stopping: Optional[str] = None
    # Kept in insertion order, never sorted.
    date_ranges: Tuple[DateRange, ...] = ()
    manufacturer: Optional[str] = None


class PastMedicationCreateRequest(FormRequest):
    generic_name: Optional[str] = None
    brand_name: Optional[str] = None
    dosage: Optional[str] = None
    dose_form: Optional[str] = None
    instructions: Optional[str] = None
    reason: Optional[str] = None
    prescriber: Optional[str] = None
    history_notes: Optional[str] = None
    reason_for_stopping: Optional[str] = None
    date_ranges: List[DateRange] = []
    manufacturer: Optional[str] = None


class PastMedicationUpdateRequest(PastMedicationCreateRequest):
    pass
