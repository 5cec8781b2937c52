"""
Shared fixtures for all tests.

factory-boy factories live here so both unit/ and integration/ can import them.
"""
import pytest
from django.test import Client

import factory
from patientor import models
from patientor.intake.types import Gender, NewPatient, Patient
from patientor.store import InMemoryRecordStore, get_record_store, reset_record_store


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------

class NewPatientFactory(factory.Factory):
    class Meta:
        model = NewPatient

    name = 'Ada Lovelace'
    gender = Gender.FEMALE
    occupation = 'engineer'
    date_of_birth = '1815-12-10'
    ssn = None


class PatientFactory(factory.Factory):
    class Meta:
        model = Patient

    id = factory.Sequence(lambda n: f'patient-{n}')
    name = 'John Doe'
    gender = Gender.MALE
    occupation = 'Cop'
    date_of_birth = None
    ssn = None
    entries = factory.LazyFunction(list)


class PatientRowFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = models.Patient

    id = factory.Sequence(lambda n: f'row-patient-{n}')
    name = 'John Doe'
    gender = 'male'
    occupation = 'Cop'


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def store():
    """Isolated in-memory store for unit tests."""
    return InMemoryRecordStore()


@pytest.fixture
def record_store(settings):
    """Process-wide store used by the views, empty and unseeded."""
    settings.RECORD_STORE_BACKEND = 'memory'
    settings.SEED_DEMO_DATA = False
    reset_record_store()
    yield get_record_store()
    reset_record_store()


@pytest.fixture
def api_client(record_store):
    """Django test client wired to a fresh in-memory store."""
    return Client()


@pytest.fixture
def sample_patient_payload():
    """Minimal valid payload for POST /api/patients."""
    return {
        'name': 'Ada',
        'gender': 'female',
        'occupation': 'engineer',
    }


@pytest.fixture
def health_check_payload():
    return {
        'type': 'HealthCheck',
        'date': '2019-10-20',
        'description': 'Yearly control visit.',
        'specialist': 'MD House',
        'healthCheckRating': 1,
    }


@pytest.fixture
def occupational_payload():
    return {
        'type': 'OccupationalHealthcare',
        'date': '2019-08-05',
        'description': 'Minor radiation poisoning.',
        'specialist': 'MD House',
        'employerName': 'HyPD',
        'diagnosisCodes': ['Z57.1', 'Z74.3'],
        'sickLeave': {'startDate': '2019-08-05', 'endDate': '2019-08-28'},
    }


@pytest.fixture
def hospital_payload():
    return {
        'type': 'Hospital',
        'date': '2024-05-01',
        'description': 'x',
        'specialist': 'Dr. Y',
        'discharge': {'date': '2024-05-03', 'criteria': 'recovered'},
    }
