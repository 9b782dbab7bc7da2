"""
Mappers between table rows and domain records.
Dates travel as ISO-8601 text in the database and as ``date`` in records.
"""
from typing import Dict, Any

from app.helpers.date_ranges import (
    parse_stored_date,
    format_stored_date,
    encode_date_ranges,
    decode_date_ranges,
)
from app.helpers.validators import require_text
from app.models.model_current_medication import CurrentMedicationRow
from app.models.model_past_medication import PastMedicationRow
from app.models.model_physician import PhysicianRow
from app.models.model_surgery import SurgeryRow
from app.schemas.sche_medication import Medication
from app.schemas.sche_past_medication import PastMedication
from app.schemas.sche_physician import Physician
from app.schemas.sche_surgery import Surgery


class MedicationMapper:

    @staticmethod
    def to_columns(medication: Medication) -> Dict[str, Any]:
        """
        Column values for an insert or whole-row update; the id is never included.

        Raises:
            ValidationError: the generic name is blank.
        """
        require_text(medication.generic_name, 'generic_name')
        values = medication.model_dump(exclude={'id'})
        values['start_date'] = format_stored_date(medication.start_date)
        return values

    @staticmethod
    def to_record(row: CurrentMedicationRow) -> Medication:
        return Medication(
            id=row.id,
            generic_name=row.generic_name,
            brand_name=row.brand_name,
            dosage=row.dosage,
            dose_form=row.dose_form,
            instructions=row.instructions,
            reason=row.reason,
            prescriber=row.prescriber,
            notes=row.notes,
            start_date=parse_stored_date(row.start_date),
            manufacturer=row.manufacturer,
        )


class PastMedicationMapper:

    @staticmethod
    def to_columns(past_medication: PastMedication) -> Dict[str, Any]:
        require_text(past_medication.generic_name, 'generic_name')
        values = past_medication.model_dump(exclude={'id', 'date_ranges'})
        values['date_ranges'] = encode_date_ranges(past_medication.date_ranges)
        return values

    @staticmethod
    def to_record(row: PastMedicationRow) -> PastMedication:
        return PastMedication(
            id=row.id,
            generic_name=row.generic_name,
            brand_name=row.brand_name,
            dosage=row.dosage,
            dose_form=row.dose_form,
            instructions=row.instructions,
            reason=row.reason,
            prescriber=row.prescriber,
            history_notes=row.history_notes,
            reason_for_stopping=row.reason_for_stopping,
            date_ranges=decode_date_ranges(row.date_ranges),
            manufacturer=row.manufacturer,
        )


class PhysicianMapper:

    @staticmethod
    def to_columns(physician: Physician) -> Dict[str, Any]:
        require_text(physician.name, 'name')
        return physician.model_dump(exclude={'id'})

    @staticmethod
    def to_record(row: PhysicianRow) -> Physician:
        return Physician(
            id=row.id,
            name=row.name,
            specialty=row.specialty,
            phone=row.phone,
            fax=row.fax,
            email=row.email,
            address=row.address,
            notes=row.notes,
        )


class SurgeryMapper:

    @staticmethod
    def to_columns(surgery: Surgery) -> Dict[str, Any]:
        require_text(surgery.name, 'name')
        values = surgery.model_dump(exclude={'id'})
        values['date'] = format_stored_date(surgery.date)
        return values

    @staticmethod
    def to_record(row: SurgeryRow) -> Surgery:
        return Surgery(
            id=row.id,
            name=row.name,
            date=parse_stored_date(row.date),
            surgeon=row.surgeon,
        )
