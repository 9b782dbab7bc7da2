from datetime import date
from typing import Callable

from fastapi import Depends, Request

from app.db.base import Database, get_database
from app.repository.repo_medication import MedicationRepository
from app.repository.repo_past_medication import PastMedicationRepository
from app.repository.repo_physician import PhysicianRepository
from app.repository.repo_surgery import SurgeryRepository
from app.services.srv_medication import MedicationService
from app.services.srv_past_medication import PastMedicationService
from app.services.srv_physician import PhysicianService
from app.services.srv_surgery import SurgeryService


def get_today(request: Request) -> Callable[[], date]:
    return request.app.state.today


def get_medication_service(
    database: Database = Depends(get_database),
    today: Callable[[], date] = Depends(get_today)
) -> MedicationService:
    return MedicationService(MedicationRepository(database, today=today))


def get_past_medication_service(
    database: Database = Depends(get_database),
    today: Callable[[], date] = Depends(get_today)
) -> PastMedicationService:
    return PastMedicationService(PastMedicationRepository(database, today=today))


def get_physician_service(database: Database = Depends(get_database)) -> PhysicianService:
    return PhysicianService(PhysicianRepository(database))


def get_surgery_service(database: Database = Depends(get_database)) -> SurgeryService:
    return SurgeryService(SurgeryRepository(database))
