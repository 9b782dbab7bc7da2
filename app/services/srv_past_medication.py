"""
Past Medication Service - medication history entries and their date ranges.
"""
import logging
from typing import List, Optional

from app.helpers.exception_handler import NotFoundError, ValidationError
from app.helpers.validators import clean_form
from app.repository.repo_past_medication import PastMedicationRepository
from app.schemas.sche_base import with_changes
from app.schemas.sche_medication import Medication, DateRange
from app.schemas.sche_past_medication import (
    PastMedication,
    PastMedicationCreateRequest,
    PastMedicationUpdateRequest,
)

logger = logging.getLogger(__name__)


class PastMedicationService:

    def __init__(self, past_medication_repo: PastMedicationRepository):
        self.past_medication_repo = past_medication_repo

    def list_past_medications(self) -> List[PastMedication]:
        return self.past_medication_repo.get_all()

    def get_past_medication(self, past_medication_id: int) -> PastMedication:
        past_medication = self.past_medication_repo.get_by_id(past_medication_id)
        if past_medication is None:
            raise NotFoundError('PastMedication', past_medication_id)
        return past_medication

    def create_past_medication(self, data: PastMedicationCreateRequest) -> PastMedication:
        past_medication = PastMedication(**clean_form(data, 'generic_name'))
        return self.past_medication_repo.add(past_medication)

    def update_past_medication(
        self,
        past_medication_id: int,
        data: PastMedicationUpdateRequest
    ) -> Optional[PastMedication]:
        past_medication = PastMedication(id=past_medication_id, **clean_form(data, 'generic_name'))
        if not self.past_medication_repo.update(past_medication):
            return None
        return past_medication

    def delete_past_medication(self, past_medication_id: int) -> bool:
        return self.past_medication_repo.delete(past_medication_id)

    def unarchive_medication(self, past_medication_id: int) -> Medication:
        """
        Move a history entry back to current medications, starting today.

        Only the descriptive fields survive; the entry's date ranges and
        reason for stopping are discarded.
        """
        past_medication = self.get_past_medication(past_medication_id)
        if past_medication.date_ranges:
            logger.info(
                f"Unarchiving past medication {past_medication_id} drops "
                f"{len(past_medication.date_ranges)} date ranges"
            )
        return self.past_medication_repo.unarchive(past_medication)

    # ---------- Date range editing ----------
    def add_date_range(self, past_medication_id: int, date_range: DateRange) -> PastMedication:
        past_medication = self.get_past_medication(past_medication_id)
        date_ranges = past_medication.date_ranges + (date_range,)
        return self._save_date_ranges(past_medication, date_ranges)

    def replace_date_range(self, past_medication_id: int, index: int, date_range: DateRange) -> PastMedication:
        past_medication = self.get_past_medication(past_medication_id)
        self._check_index(past_medication, index)
        date_ranges = list(past_medication.date_ranges)
        date_ranges[index] = date_range
        return self._save_date_ranges(past_medication, tuple(date_ranges))

    def remove_date_range(self, past_medication_id: int, index: int) -> PastMedication:
        past_medication = self.get_past_medication(past_medication_id)
        self._check_index(past_medication, index)
        date_ranges = past_medication.date_ranges[:index] + past_medication.date_ranges[index + 1:]
        return self._save_date_ranges(past_medication, date_ranges)

    def _check_index(self, past_medication: PastMedication, index: int) -> None:
        if index < 0 or index >= len(past_medication.date_ranges):
            raise ValidationError('index', f"No date range at index {index}")

    def _save_date_ranges(self, past_medication: PastMedication, date_ranges) -> PastMedication:
        updated = with_changes(past_medication, date_ranges=date_ranges)
        if not self.past_medication_repo.update(updated):
            raise NotFoundError('PastMedication', past_medication.id)
        return updated
