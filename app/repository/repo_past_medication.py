"""
Repository for past medications.
Handles the past_meds table and moving entries back to current_meds.
"""
import logging
from datetime import date
from typing import Callable, List, Optional

from app.db.base import Database
from app.helpers.exception_handler import NotFoundError, StorageError
from app.models.model_current_medication import CurrentMedicationRow
from app.models.model_past_medication import PastMedicationRow
from app.repository.mappers import MedicationMapper, PastMedicationMapper
from app.schemas.sche_medication import Medication
from app.schemas.sche_past_medication import PastMedication

logger = logging.getLogger(__name__)


class PastMedicationRepository:
    """Repository for PastMedication records."""

    def __init__(self, database: Database, today: Callable[[], date] = date.today):
        self.database = database
        self.today = today

    def add(self, past_medication: PastMedication) -> PastMedication:
        with self.database.session_scope() as session:
            row = PastMedicationRow(**PastMedicationMapper.to_columns(past_medication))
            session.add(row)
            session.flush()
            created = past_medication.model_copy(update={'id': row.id})
        logger.info(f"Created past medication: {created.id}")
        return created

    def get_all(self) -> List[PastMedication]:
        with self.database.session_scope() as session:
            rows = session.query(PastMedicationRow).order_by(PastMedicationRow.id).all()
            return [PastMedicationMapper.to_record(row) for row in rows]

    def get_by_id(self, past_medication_id: int) -> Optional[PastMedication]:
        with self.database.session_scope() as session:
            row = session.get(PastMedicationRow, past_medication_id)
            return PastMedicationMapper.to_record(row) if row else None

    def update(self, past_medication: PastMedication) -> bool:
        with self.database.session_scope() as session:
            row = session.get(PastMedicationRow, past_medication.id)
            if row is None:
                logger.info(f"No past medication found with id {past_medication.id} to update")
                return False
            for column, value in PastMedicationMapper.to_columns(past_medication).items():
                setattr(row, column, value)
        logger.info(f"Updated past medication: {past_medication.id}")
        return True

    def delete(self, past_medication_id: int) -> bool:
        """Remove a history entry outright. Nothing is moved back to current medications."""
        with self.database.session_scope() as session:
            row = session.get(PastMedicationRow, past_medication_id)
            if row is None:
                logger.info(f"No past medication found with id {past_medication_id} to delete")
                return False
            session.delete(row)
        logger.info(f"Deleted past medication: {past_medication_id}")
        return True

    def unarchive(self, past_medication: PastMedication) -> Medication:
        """
        Move a history entry back to current medications in one transaction.

        The new medication starts today and takes the history notes as its
        notes. Date ranges and the reason for stopping are not carried over.

        Raises:
            NotFoundError: no past medication has that id; nothing is written.
            StorageError: either statement failed; both were rolled back.
        """
        medication = Medication(
            generic_name=past_medication.generic_name,
            brand_name=past_medication.brand_name,
            dosage=past_medication.dosage,
            dose_form=past_medication.dose_form,
            instructions=past_medication.instructions,
            reason=past_medication.reason,
            prescriber=past_medication.prescriber,
            notes=past_medication.history_notes,
            start_date=self.today(),
            manufacturer=past_medication.manufacturer,
        )
        try:
            with self.database.session_scope() as session:
                past_row = session.get(PastMedicationRow, past_medication.id)
                if past_row is None:
                    raise NotFoundError('PastMedication', past_medication.id)

                current_row = CurrentMedicationRow(**MedicationMapper.to_columns(medication))
                session.add(current_row)
                session.flush()

                session.delete(past_row)
                session.flush()
                restored = medication.model_copy(update={'id': current_row.id})
        except StorageError as e:
            logger.error(f"Error unarchiving past medication {past_medication.id}: {e}", exc_info=True)
            raise
        logger.info(f"Unarchived past medication {past_medication.id} as medication {restored.id}")
        return restored
