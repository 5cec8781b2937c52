"""
Demo 患者数据。

内存存储启动时（settings.SEED_DEMO_DATA=True）灌进去，
这样一启动 GET /api/patients 就有东西可看。

所有记录都以原始 JSON 形状写出，再走一遍正式的 intake 校验，
保证种子数据和线上提交的数据满足同样的约束。幂等：已存在的 id 会跳过。
"""

from .intake import parse_entry, parse_new_patient
from .intake.types import Patient

DEMO_PATIENTS = [
    {
        "id": "d2773336-f723-11e9-8f0b-362b9e155667",
        "name": "John McClane",
        "dateOfBirth": "1986-07-09",
        "ssn": "090786-122X",
        "gender": "male",
        "occupation": "New york city cop",
        "entries": [
            {
                "id": "d811e46d-70b3-4d90-b090-4535c7cf8fb1",
                "date": "2015-01-02",
                "type": "Hospital",
                "specialist": "MD House",
                "diagnosisCodes": ["S62.5"],
                "description": "Healing time appr. 2 weeks. patient doesn't remember how he got the injury.",
                "discharge": {"date": "2015-01-16", "criteria": "Thumb has healed."},
            },
        ],
    },
    {
        "id": "d2773598-f723-11e9-8f0b-362b9e155667",
        "name": "Martin Riggs",
        "dateOfBirth": "1979-01-30",
        "ssn": "300179-77A",
        "gender": "male",
        "occupation": "Cop",
        "entries": [
            {
                "id": "fcd59fa6-c4b4-4fec-ac4d-df4fe1f85f62",
                "date": "2019-08-05",
                "type": "OccupationalHealthcare",
                "specialist": "MD House",
                "employerName": "HyPD",
                "diagnosisCodes": ["Z57.1", "Z74.3", "M51.2"],
                "description": "Patient mistakenly found himself in a nuclear plant waiting room without protection gear. Very minor radiation poisoning. ",
                "sickLeave": {"startDate": "2019-08-05", "endDate": "2019-08-28"},
            },
        ],
    },
    {
        "id": "d27736ec-f723-11e9-8f0b-362b9e155667",
        "name": "Hans Gruber",
        "dateOfBirth": "1970-04-25",
        "ssn": "250470-555L",
        "gender": "other",
        "occupation": "Technician",
        "entries": [],
    },
    {
        "id": "d2773822-f723-11e9-8f0b-362b9e155667",
        "name": "Dana Scully",
        "dateOfBirth": "1974-01-05",
        "ssn": "050174-432N",
        "gender": "female",
        "occupation": "Forensic Pathologist",
        "entries": [
            {
                "id": "b4f4eca1-2aa7-4b13-9a18-4a5535c3c8da",
                "date": "2019-10-20",
                "specialist": "MD House",
                "type": "HealthCheck",
                "description": "Yearly control visit. Cholesterol levels back to normal.",
                "healthCheckRating": 0,
            },
            {
                "id": "5b1e6c8f-4a0d-4a55-b3e2-7d2c0f9a1e44",
                "date": "2019-09-10",
                "specialist": "MD House",
                "type": "OccupationalHealthcare",
                "employerName": "FBI",
                "description": "Prescriptions renewed.",
            },
            {
                "id": "37be178f-a432-4ba4-aac2-f86810e36a15",
                "date": "2018-10-05",
                "specialist": "MD House",
                "type": "HealthCheck",
                "description": "Yearly control visit. Due to high cholesterol levels recommended to eat more vegetables.",
                "healthCheckRating": 1,
            },
        ],
    },
    {
        "id": "d2773c6e-f723-11e9-8f0b-362b9e155667",
        "name": "Matti Luukkainen",
        "dateOfBirth": "1971-04-09",
        "ssn": "090471-8890",
        "gender": "male",
        "occupation": "Digital evangelist",
        "entries": [
            {
                "id": "54a8746e-34c4-4cf4-bf72-bfecd039be9a",
                "date": "2019-05-01",
                "specialist": "Dr Byte House",
                "type": "HealthCheck",
                "description": "Digital overdose, very bytestatic. Otherwise healthy.",
                "healthCheckRating": 0,
            },
        ],
    },
]


def build_demo_patients(records=None) -> list[Patient]:
    """把原始 JSON 形状的种子记录转换成经过校验的 Patient。"""
    patients = []
    for record in records if records is not None else DEMO_PATIENTS:
        new_patient = parse_new_patient(record)
        entries = [
            parse_entry(raw, id_factory=lambda raw=raw: raw["id"])
            for raw in record.get("entries", [])
        ]
        patients.append(Patient(
            id=record["id"],
            name=new_patient.name,
            gender=new_patient.gender,
            occupation=new_patient.occupation,
            date_of_birth=new_patient.date_of_birth,
            ssn=new_patient.ssn,
            entries=entries,
        ))
    return patients


def seed_demo_data(store) -> int:
    """把 demo 患者写入 store，返回新写入的数量。"""
    created = 0
    for patient in build_demo_patients():
        if store.has_patient(patient.id):
            continue
        store.add_patient(patient)
        created += 1
    return created
