"""
Response serializers — dataclass → JSON-able dict。

只负责「输出格式化」，不做任何解析或校验。
输入解析和校验在 patientor/intake/ 里。

key 一律 camelCase；值为 None 的可选字段直接省略，不输出 null。
"""

from .intake.types import (
    HealthCheckEntry,
    HospitalEntry,
    OccupationalHealthcareEntry,
)


def _drop_none(data):
    return {key: value for key, value in data.items() if value is not None}


def serialize_entry(entry):
    """Serialize one journal entry, variant fields included."""
    data = {
        'id': entry.id,
        'type': entry.type.value,
        'date': entry.date,
        'description': entry.description,
        'specialist': entry.specialist,
        'diagnosisCodes': list(entry.diagnosis_codes),
    }

    if isinstance(entry, HealthCheckEntry):
        data['healthCheckRating'] = int(entry.health_check_rating)
    elif isinstance(entry, OccupationalHealthcareEntry):
        data['employerName'] = entry.employer_name
        if entry.sick_leave is not None:
            data['sickLeave'] = {
                'startDate': entry.sick_leave.start_date,
                'endDate': entry.sick_leave.end_date,
            }
    elif isinstance(entry, HospitalEntry):
        data['discharge'] = {
            'date': entry.discharge.date,
            'criteria': entry.discharge.criteria,
        }

    return data


def serialize_patient_summary(patient):
    """Serialize patient without entries (list view)."""
    return _drop_none({
        'id': patient.id,
        'name': patient.name,
        'dateOfBirth': patient.date_of_birth,
        'ssn': patient.ssn,
        'gender': patient.gender.value,
        'occupation': patient.occupation,
    })


def serialize_patient(patient):
    """Serialize patient detail with the full journal in insertion order."""
    data = serialize_patient_summary(patient)
    data['entries'] = [serialize_entry(entry) for entry in patient.entries]
    return data


def serialize_diagnosis(diagnosis):
    return _drop_none({
        'code': diagnosis.code,
        'name': diagnosis.name,
        'latin': diagnosis.latin,
    })
