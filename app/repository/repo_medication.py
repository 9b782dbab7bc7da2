"""
Repository for current medications.
Handles the current_meds table and archiving into past_meds.
"""
import logging
from datetime import date
from typing import Callable, List, Optional

from app.core.config import settings
from app.db.base import Database
from app.helpers.exception_handler import NotFoundError, StorageError
from app.models.model_current_medication import CurrentMedicationRow
from app.models.model_past_medication import PastMedicationRow
from app.repository.mappers import MedicationMapper, PastMedicationMapper
from app.schemas.sche_medication import Medication, DateRange
from app.schemas.sche_past_medication import PastMedication

logger = logging.getLogger(__name__)


class MedicationRepository:
    """Repository for Medication records."""

    def __init__(self, database: Database, today: Callable[[], date] = date.today):
        """
        Initialize repository.

        Args:
            database: Database the repository reads and writes.
            today: Clock used when archiving; defaults to the local calendar day.
        """
        self.database = database
        self.today = today

    def add(self, medication: Medication) -> Medication:
        """
        Insert a medication. Any id on the input is ignored.

        Returns:
            The stored Medication carrying its generated id.
        """
        with self.database.session_scope() as session:
            row = CurrentMedicationRow(**MedicationMapper.to_columns(medication))
            session.add(row)
            session.flush()
            created = medication.model_copy(update={'id': row.id})
        logger.info(f"Created current medication: {created.id}")
        return created

    def get_all(self) -> List[Medication]:
        with self.database.session_scope() as session:
            rows = session.query(CurrentMedicationRow).order_by(CurrentMedicationRow.id).all()
            return [MedicationMapper.to_record(row) for row in rows]

    def get_by_id(self, medication_id: int) -> Optional[Medication]:
        with self.database.session_scope() as session:
            row = session.get(CurrentMedicationRow, medication_id)
            return MedicationMapper.to_record(row) if row else None

    def update(self, medication: Medication) -> bool:
        """
        Replace every column of the row matching ``medication.id``.

        Returns:
            True if a row was updated, False if no row has that id.
        """
        with self.database.session_scope() as session:
            row = session.get(CurrentMedicationRow, medication.id)
            if row is None:
                logger.info(f"No current medication found with id {medication.id} to update")
                return False
            for column, value in MedicationMapper.to_columns(medication).items():
                setattr(row, column, value)
        logger.info(f"Updated current medication: {medication.id}")
        return True

    def delete(self, medication_id: int) -> bool:
        with self.database.session_scope() as session:
            row = session.get(CurrentMedicationRow, medication_id)
            if row is None:
                logger.info(f"No current medication found with id {medication_id} to delete")
                return False
            session.delete(row)
        logger.info(f"Deleted current medication: {medication_id}")
        return True

    def archive(self, medication: Medication) -> PastMedication:
        """
        Move a medication into the history table in one transaction.

        The history entry gets a single date range from the medication's
        start date to today, and its notes become the history notes.

        Args:
            medication: The medication to move; matched on id.

        Returns:
            The created PastMedication with its generated id.

        Raises:
            NotFoundError: no current medication has that id; nothing is written.
            StorageError: either statement failed; both were rolled back.
        """
        past_medication = PastMedication(
            generic_name=medication.generic_name,
            brand_name=medication.brand_name,
            dosage=medication.dosage,
            dose_form=medication.dose_form,
            instructions=medication.instructions,
            reason=medication.reason,
            prescriber=medication.prescriber,
            history_notes=medication.notes,
            reason_for_stopping=settings.ARCHIVE_REASON_FOR_STOPPING,
            date_ranges=(DateRange(start_date=medication.start_date, end_date=self.today()),),
            manufacturer=medication.manufacturer,
        )
        try:
            with self.database.session_scope() as session:
                current_row = session.get(CurrentMedicationRow, medication.id)
                if current_row is None:
                    raise NotFoundError('Medication', medication.id)

                past_row = PastMedicationRow(**PastMedicationMapper.to_columns(past_medication))
                session.add(past_row)
                session.flush()

                session.delete(current_row)
                session.flush()
                archived = past_medication.model_copy(update={'id': past_row.id})
        except StorageError as e:
            logger.error(f"Error archiving medication {medication.id}: {e}", exc_info=True)
            raise
        logger.info(f"Archived medication {medication.id} as past medication {archived.id}")
        return archived
