"""
Pytest configuration for the MediChart test suite
"""
import os

# Keep the module-level application in app.main off the real database file
os.environ["SQL_DATABASE_URL"] = "sqlite://"

from datetime import date

import pytest

from app.db.base import Database
from app.repository.repo_medication import MedicationRepository
from app.repository.repo_past_medication import PastMedicationRepository
from app.repository.repo_physician import PhysicianRepository
from app.repository.repo_surgery import SurgeryRepository

TODAY = date(2024, 6, 1)


@pytest.fixture
def database(tmp_path):
    """A fresh database file per test"""
    db = Database(f"sqlite:///{tmp_path / 'medichart.db'}")
    db.create_tables()
    yield db
    db.dispose()


@pytest.fixture
def medication_repo(database):
    return MedicationRepository(database, today=lambda: TODAY)


@pytest.fixture
def past_medication_repo(database):
    return PastMedicationRepository(database, today=lambda: TODAY)


@pytest.fixture
def physician_repo(database):
    return PhysicianRepository(database)


@pytest.fixture
def surgery_repo(database):
    return SurgeryRepository(database)


@pytest.fixture
def client(database):
    from fastapi.testclient import TestClient
    from app.main import get_application

    with TestClient(get_application(database, today=lambda: TODAY)) as test_client:
        yield test_client
