"""
Tests for the immutable domain records
"""
from datetime import date

import pytest
from pydantic import ValidationError as PydanticValidationError

from app.schemas.sche_base import with_changes
from app.schemas.sche_medication import Medication, MedicationCreateRequest, DateRange
from app.schemas.sche_past_medication import PastMedication, PastMedicationCreateRequest
from app.schemas.sche_physician import Physician
from app.schemas.sche_surgery import Surgery, SurgeryCreateRequest


class TestRecords:

    def test_structural_equality(self):
        a = Medication(generic_name="Lisinopril", dosage="10mg", start_date=date(2024, 1, 15))
        b = Medication(generic_name="Lisinopril", dosage="10mg", start_date=date(2024, 1, 15))
        assert a == b
        assert hash(a) == hash(b)

    def test_records_are_immutable(self):
        physician = Physician(name="Dr. Reyes")
        with pytest.raises(PydanticValidationError):
            physician.name = "Dr. Other"

    def test_identity_defaults_to_zero(self):
        assert Surgery(name="Appendectomy").id == 0
        assert Physician(name="Dr. Reyes").id == 0

    def test_optional_fields_default_to_none(self):
        medication = Medication(generic_name="Metformin")
        assert medication.brand_name is None
        assert medication.start_date is None

    def test_past_medication_date_ranges_from_list(self):
        past = PastMedication(
            generic_name="Amoxicillin",
            date_ranges=[{"start_date": "2023-01-01", "end_date": None}],
        )
        assert past.date_ranges == (DateRange(start_date=date(2023, 1, 1)),)

    def test_date_range_equality_by_value(self):
        assert DateRange(start_date=date(2023, 1, 1)) == DateRange(start_date=date(2023, 1, 1), end_date=None)
        assert DateRange(start_date=date(2023, 1, 1)) != DateRange(end_date=date(2023, 1, 1))


class TestWithChanges:

    def test_replaces_only_given_fields(self):
        medication = Medication(id=4, generic_name="Atorvastatin", dosage="20mg", notes="evening")
        changed = with_changes(medication, dosage="40mg")

        assert changed == Medication(id=4, generic_name="Atorvastatin", dosage="40mg", notes="evening")
        assert medication.dosage == "20mg"

    def test_overrides_are_validated(self):
        surgery = Surgery(id=1, name="Knee arthroscopy")
        assert with_changes(surgery, date="2021-05-04").date == date(2021, 5, 4)

    def test_unknown_field_rejected(self):
        with pytest.raises(ValueError):
            with_changes(Physician(name="Dr. Reyes"), pager="555")

    def test_nested_date_ranges(self):
        past = PastMedication(id=2, generic_name="Prednisone", date_ranges=[DateRange(start_date=date(2022, 1, 1))])
        extended = with_changes(past, date_ranges=past.date_ranges + (DateRange(end_date=date(2023, 1, 1)),))
        assert len(extended.date_ranges) == 2
        assert extended.date_ranges[0] == past.date_ranges[0]


class TestFormRequests:

    def test_blank_date_reads_as_absent(self):
        assert MedicationCreateRequest(generic_name="Aspirin", start_date="").start_date is None
        assert SurgeryCreateRequest(name="Tonsillectomy", date="  ").date is None

    def test_blank_dates_inside_range_read_as_absent(self):
        assert DateRange(start_date="", end_date="  ") == DateRange()
        request = PastMedicationCreateRequest(
            generic_name="Ibuprofen",
            date_ranges=[{"start_date": "", "end_date": "2023-01-01"}],
        )
        assert request.date_ranges == [DateRange(end_date=date(2023, 1, 1))]

    def test_missing_name_is_allowed_at_schema_level(self):
        assert MedicationCreateRequest().generic_name is None
