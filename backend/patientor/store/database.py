"""
Django ORM 存储：patients / journal_entries 两张表。

变体独有字段存在 JournalEntry.details（JSON）里，读出时还原成对应的 Entry dataclass，
可选字段缺失就是缺失，不会变成 null。追加 entry 时对患者行加锁，
position 在事务内计算，保证同一患者的 journal 顺序不乱。
"""

from typing import Optional

from django.db import transaction

from .. import models
from ..intake.types import (
    Discharge,
    Entry,
    EntryType,
    Gender,
    HealthCheckEntry,
    HealthCheckRating,
    HospitalEntry,
    OccupationalHealthcareEntry,
    Patient,
    SickLeave,
)
from ..serializers import serialize_entry
from .base import BaseRecordStore


# ── Entry <-> row ────────────────────────────────────────────────────────

_COMMON_KEYS = {'id', 'type', 'date', 'description', 'specialist', 'diagnosisCodes'}


def entry_details(entry: Entry) -> dict:
    """取出变体独有字段，camelCase，和 API 的 JSON 形状一致。"""
    return {key: value for key, value in serialize_entry(entry).items() if key not in _COMMON_KEYS}


def entry_from_row(row: models.JournalEntry) -> Entry:
    common = {
        'id': row.id,
        'date': row.date,
        'description': row.description,
        'specialist': row.specialist,
        'diagnosis_codes': list(row.diagnosis_codes or []),
    }
    details = row.details or {}

    if row.type == EntryType.HEALTH_CHECK.value:
        return HealthCheckEntry(
            health_check_rating=HealthCheckRating(details['healthCheckRating']),
            **common,
        )
    if row.type == EntryType.OCCUPATIONAL_HEALTHCARE.value:
        sick_leave = details.get('sickLeave')
        return OccupationalHealthcareEntry(
            employer_name=details['employerName'],
            sick_leave=SickLeave(
                start_date=sick_leave['startDate'],
                end_date=sick_leave['endDate'],
            ) if sick_leave else None,
            **common,
        )
    if row.type == EntryType.HOSPITAL.value:
        discharge = details['discharge']
        return HospitalEntry(
            discharge=Discharge(date=discharge['date'], criteria=discharge['criteria']),
            **common,
        )
    raise ValueError(f"Unknown entry type in journal_entries: {row.type!r}")


def patient_from_row(row: models.Patient) -> Patient:
    return Patient(
        id=row.id,
        name=row.name,
        gender=Gender(row.gender),
        occupation=row.occupation,
        date_of_birth=row.date_of_birth,
        ssn=row.ssn,
        entries=[entry_from_row(e) for e in row.entries.all()],
    )


def _create_entry_row(patient_row: models.Patient, entry: Entry, position: int) -> None:
    if models.JournalEntry.objects.filter(id=entry.id).exists():
        raise ValueError(f"Entry id already in use: {entry.id!r}")
    models.JournalEntry.objects.create(
        id=entry.id,
        patient=patient_row,
        position=position,
        type=entry.type.value,
        date=entry.date,
        description=entry.description,
        specialist=entry.specialist,
        diagnosis_codes=list(entry.diagnosis_codes),
        details=entry_details(entry),
    )


# ── DatabaseRecordStore ──────────────────────────────────────────────────

class DatabaseRecordStore(BaseRecordStore):

    def add_patient(self, patient: Patient) -> Patient:
        with transaction.atomic():
            if models.Patient.objects.filter(id=patient.id).exists():
                raise ValueError(f"Patient id already in use: {patient.id!r}")
            row = models.Patient.objects.create(
                id=patient.id,
                name=patient.name,
                gender=patient.gender.value,
                occupation=patient.occupation,
                date_of_birth=patient.date_of_birth,
                ssn=patient.ssn,
            )
            for position, entry in enumerate(patient.entries):
                _create_entry_row(row, entry, position)
        return self.get_patient(patient.id)

    def get_patient(self, patient_id: str) -> Optional[Patient]:
        row = (
            models.Patient.objects
            .filter(id=patient_id)
            .prefetch_related('entries')
            .first()
        )
        return patient_from_row(row) if row is not None else None

    def has_patient(self, patient_id: str) -> bool:
        return models.Patient.objects.filter(id=patient_id).exists()

    def all_patients(self) -> list[Patient]:
        rows = models.Patient.objects.prefetch_related('entries').all()
        return [patient_from_row(row) for row in rows]

    def append_entry(self, patient_id: str, entry: Entry) -> Optional[Entry]:
        with transaction.atomic():
            row = models.Patient.objects.select_for_update().filter(id=patient_id).first()
            if row is None:
                return None
            position = row.entries.count()
            _create_entry_row(row, entry, position)
        return entry

    def count(self) -> int:
        return models.Patient.objects.count()
