from typing import Optional

from app.schemas.sche_base import RecordBase, FormRequest


class Physician(RecordBase):
    id: int = 0
    name: str
    specialty: Optional[str] = None
    phone: Optional[str] = None
    fax: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    notes: Optional[str] = None


class PhysicianCreateRequest(FormRequest):
    name: Optional[str] = None
    specialty: Optional[str] = None
    phone: Optional[str] = None
    fax: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    notes: Optional[str] = None


class PhysicianUpdateRequest(PhysicianCreateRequest):
    pass
