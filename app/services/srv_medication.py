import logging
from typing import List, Optional

from app.helpers.exception_handler import NotFoundError
from app.helpers.validators import clean_form
from app.repository.repo_medication import MedicationRepository
from app.schemas.sche_medication import Medication, MedicationCreateRequest, MedicationUpdateRequest
from app.schemas.sche_past_medication import PastMedication

logger = logging.getLogger(__name__)


class MedicationService:
    """Validates form input for current medications and drives the repository."""

    def __init__(self, medication_repo: MedicationRepository):
        self.medication_repo = medication_repo

    def list_medications(self) -> List[Medication]:
        return self.medication_repo.get_all()

    def get_medication(self, medication_id: int) -> Medication:
        medication = self.medication_repo.get_by_id(medication_id)
        if medication is None:
            raise NotFoundError('Medication', medication_id)
        return medication

    def create_medication(self, data: MedicationCreateRequest) -> Medication:
        medication = Medication(**clean_form(data, 'generic_name'))
        return self.medication_repo.add(medication)

    def update_medication(self, medication_id: int, data: MedicationUpdateRequest) -> Optional[Medication]:
        """
        Replace the whole record. Returns None when the id no longer exists.
        """
        medication = Medication(id=medication_id, **clean_form(data, 'generic_name'))
        if not self.medication_repo.update(medication):
            return None
        return medication

    def delete_medication(self, medication_id: int) -> bool:
        return self.medication_repo.delete(medication_id)

    def archive_medication(self, medication_id: int) -> PastMedication:
        medication = self.get_medication(medication_id)
        logger.info(f"Archiving medication {medication_id} ({medication.generic_name})")
        return self.medication_repo.archive(medication)
