import datetime
from typing import Optional

from app.schemas.sche_base import RecordBase, FormRequest


class Surgery(RecordBase):
    id: int = 0
    name: str
    date: Optional[datetime.date] = None
    surgeon: Optional[str] = None


class SurgeryCreateRequest(FormRequest):
    name: Optional[str] = None
    date: Optional[datetime.date] = None
    surgeon: Optional[str] = None


class SurgeryUpdateRequest(SurgeryCreateRequest):
    pass
