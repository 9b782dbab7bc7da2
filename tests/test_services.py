"""
Tests for the form-validating service layer
"""
from datetime import date

import pytest

from app.helpers.exception_handler import NotFoundError, ValidationError
from app.schemas.sche_medication import MedicationCreateRequest, MedicationUpdateRequest, DateRange
from app.schemas.sche_past_medication import PastMedicationCreateRequest
from app.schemas.sche_physician import PhysicianCreateRequest, PhysicianUpdateRequest
from app.schemas.sche_surgery import SurgeryCreateRequest
from app.services.srv_medication import MedicationService
from app.services.srv_past_medication import PastMedicationService
from app.services.srv_physician import PhysicianService
from app.services.srv_surgery import SurgeryService
from tests.conftest import TODAY


@pytest.fixture
def medication_service(medication_repo):
    return MedicationService(medication_repo)


@pytest.fixture
def past_medication_service(past_medication_repo):
    return PastMedicationService(past_medication_repo)


@pytest.fixture
def physician_service(physician_repo):
    return PhysicianService(physician_repo)


@pytest.fixture
def surgery_service(surgery_repo):
    return SurgeryService(surgery_repo)


class TestRequiredFields:

    @pytest.mark.parametrize("name", [None, "", "   ", "\t\n"])
    def test_blank_generic_name_rejected(self, medication_service, medication_repo, name):
        with pytest.raises(ValidationError) as exc_info:
            medication_service.create_medication(MedicationCreateRequest(generic_name=name, dosage="5mg"))

        assert exc_info.value.field == "generic_name"
        assert medication_repo.get_all() == []

    def test_blank_physician_name_rejected(self, physician_service, physician_repo):
        with pytest.raises(ValidationError) as exc_info:
            physician_service.create_physician(PhysicianCreateRequest(name="  ", phone="555-0100"))

        assert exc_info.value.field == "name"
        assert physician_repo.get_all() == []

    def test_blank_surgery_name_rejected(self, surgery_service, surgery_repo):
        with pytest.raises(ValidationError):
            surgery_service.create_surgery(SurgeryCreateRequest(name="", date=date(2020, 1, 1)))
        assert surgery_repo.get_all() == []

    def test_blank_past_medication_name_rejected(self, past_medication_service, past_medication_repo):
        with pytest.raises(ValidationError):
            past_medication_service.create_past_medication(PastMedicationCreateRequest(generic_name=" "))
        assert past_medication_repo.get_all() == []

    def test_update_with_blank_name_leaves_row(self, physician_service, physician_repo):
        created = physician_service.create_physician(PhysicianCreateRequest(name="Dr. Reyes"))

        with pytest.raises(ValidationError):
            physician_service.update_physician(created.id, PhysicianUpdateRequest(name=""))

        assert physician_repo.get_by_id(created.id).name == "Dr. Reyes"


class TestFormCleaning:

    def test_blank_optional_fields_stored_as_absent(self, medication_service, medication_repo):
        created = medication_service.create_medication(MedicationCreateRequest(
            generic_name="  Lisinopril ", brand_name="", dosage="   ", notes=" morning  ", start_date="",
        ))

        stored = medication_repo.get_by_id(created.id)
        assert stored.generic_name == "Lisinopril"
        assert stored.brand_name is None
        assert stored.dosage is None
        assert stored.start_date is None
        assert stored.notes == "morning"

    def test_surgery_date_parsed(self, surgery_service):
        created = surgery_service.create_surgery(SurgeryCreateRequest(name="Appendectomy", date="2010-07-02"))
        assert created.date == date(2010, 7, 2)

    def test_past_medication_with_ranges(self, past_medication_service, past_medication_repo):
        created = past_medication_service.create_past_medication(PastMedicationCreateRequest(
            generic_name="Amoxicillin",
            date_ranges=[{"start_date": "2023-01-01", "end_date": "2023-01-10"}, {"end_date": "2023-05-01"}],
        ))

        assert past_medication_repo.get_by_id(created.id).date_ranges == (
            DateRange(start_date=date(2023, 1, 1), end_date=date(2023, 1, 10)),
            DateRange(start_date=None, end_date=date(2023, 5, 1)),
        )


class TestLookups:

    def test_get_missing_raises(self, medication_service, physician_service, surgery_service):
        with pytest.raises(NotFoundError):
            medication_service.get_medication(1)
        with pytest.raises(NotFoundError):
            physician_service.get_physician(1)
        with pytest.raises(NotFoundError):
            surgery_service.get_surgery(1)

    def test_update_missing_returns_none(self, medication_service, medication_repo):
        assert medication_service.update_medication(42, MedicationUpdateRequest(generic_name="Aspirin")) is None
        assert medication_repo.get_all() == []

    def test_update_replaces_record(self, medication_service):
        created = medication_service.create_medication(
            MedicationCreateRequest(generic_name="Aspirin", dosage="81mg", notes="with food")
        )

        updated = medication_service.update_medication(
            created.id, MedicationUpdateRequest(generic_name="Aspirin", dosage="325mg")
        )

        assert updated.dosage == "325mg"
        assert updated.notes is None
        assert medication_service.get_medication(created.id) == updated

    def test_delete(self, surgery_service):
        created = surgery_service.create_surgery(SurgeryCreateRequest(name="Tonsillectomy"))
        assert surgery_service.delete_surgery(created.id) is True
        assert surgery_service.delete_surgery(created.id) is False


class TestArchiveFlow:

    def test_archive_by_id(self, medication_service, past_medication_service):
        created = medication_service.create_medication(
            MedicationCreateRequest(generic_name="Lisinopril", start_date="2024-01-15")
        )

        archived = medication_service.archive_medication(created.id)

        assert medication_service.list_medications() == []
        assert past_medication_service.list_past_medications() == [archived]
        assert archived.date_ranges[0].end_date == TODAY

    def test_archive_missing_id(self, medication_service):
        with pytest.raises(NotFoundError):
            medication_service.archive_medication(9)

    def test_unarchive_by_id(self, medication_service, past_medication_service):
        created = past_medication_service.create_past_medication(PastMedicationCreateRequest(
            generic_name="Warfarin", history_notes="INR monitored",
            date_ranges=[{"start_date": "2021-01-01", "end_date": "2021-12-31"}],
        ))

        restored = past_medication_service.unarchive_medication(created.id)

        assert past_medication_service.list_past_medications() == []
        assert medication_service.list_medications() == [restored]
        assert restored.notes == "INR monitored"
        assert restored.start_date == TODAY

    def test_unarchive_missing_id(self, past_medication_service):
        with pytest.raises(NotFoundError):
            past_medication_service.unarchive_medication(3)


class TestDateRangeEditing:

    @pytest.fixture
    def past_medication(self, past_medication_service):
        return past_medication_service.create_past_medication(PastMedicationCreateRequest(
            generic_name="Prednisone",
            date_ranges=[
                {"start_date": "2022-01-01", "end_date": "2022-01-14"},
                {"start_date": "2022-08-01", "end_date": "2022-08-07"},
            ],
        ))

    def test_add_appends(self, past_medication_service, past_medication_repo, past_medication):
        new_range = DateRange(start_date=date(2023, 3, 1), end_date=None)

        updated = past_medication_service.add_date_range(past_medication.id, new_range)

        assert len(updated.date_ranges) == 3
        assert updated.date_ranges[-1] == new_range
        assert past_medication_repo.get_by_id(past_medication.id) == updated

    def test_replace(self, past_medication_service, past_medication_repo, past_medication):
        replacement = DateRange(start_date=date(2022, 8, 2), end_date=date(2022, 8, 9))

        updated = past_medication_service.replace_date_range(past_medication.id, 1, replacement)

        assert updated.date_ranges[0] == past_medication.date_ranges[0]
        assert updated.date_ranges[1] == replacement
        assert past_medication_repo.get_by_id(past_medication.id).date_ranges == updated.date_ranges

    def test_remove(self, past_medication_service, past_medication_repo, past_medication):
        updated = past_medication_service.remove_date_range(past_medication.id, 0)

        assert updated.date_ranges == past_medication.date_ranges[1:]
        assert past_medication_repo.get_by_id(past_medication.id).date_ranges == past_medication.date_ranges[1:]

    def test_remove_last_range_clears_column(self, past_medication_service, past_medication):
        past_medication_service.remove_date_range(past_medication.id, 0)
        updated = past_medication_service.remove_date_range(past_medication.id, 0)

        assert updated.date_ranges == ()
        assert past_medication_service.get_past_medication(past_medication.id).date_ranges == ()

    @pytest.mark.parametrize("index", [-1, 2, 10])
    def test_bad_index(self, past_medication_service, past_medication, index):
        with pytest.raises(ValidationError) as exc_info:
            past_medication_service.remove_date_range(past_medication.id, index)

        assert exc_info.value.field == "index"
        assert past_medication_service.get_past_medication(past_medication.id) == past_medication

    def test_edit_missing_entry(self, past_medication_service):
        with pytest.raises(NotFoundError):
            past_medication_service.add_date_range(99, DateRange())
