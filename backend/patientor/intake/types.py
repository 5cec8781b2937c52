"""
Patient / Entry dataclasses — 业务逻辑唯一认识的标准格式。

所有 parser 的 build() 必须返回这里的某个 Entry 变体；
业务层（services.py）和存储层（store/）只消费这些结构，永远不碰外部原始数据。

可选字段统一用 None 表示「不存在」，输出 JSON 时直接省略该 key，不会出现 null。
"""

import uuid
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Optional, Union


def new_id() -> str:
    """唯一 id 生成器：每个 Patient / Entry 调用一次，返回不透明字符串。"""
    return str(uuid.uuid1())


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class HealthCheckRating(IntEnum):
    HEALTHY = 0
    LOW_RISK = 1
    HIGH_RISK = 2
    CRITICAL_RISK = 3


class EntryType(str, Enum):
    HEALTH_CHECK = "HealthCheck"
    OCCUPATIONAL_HEALTHCARE = "OccupationalHealthcare"
    HOSPITAL = "Hospital"


# ── Entry 变体 ────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class EntryBase:
    """四个公共字段，校验通过后才会构造。"""
    date: str
    description: str
    specialist: str
    diagnosis_codes: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class SickLeave:
    start_date: str
    end_date: str


@dataclass(frozen=True)
class Discharge:
    date: str
    criteria: str


@dataclass(frozen=True)
class HealthCheckEntry:
    id: str
    date: str
    description: str
    specialist: str
    health_check_rating: HealthCheckRating
    diagnosis_codes: list[str] = field(default_factory=list)
    type: EntryType = field(default=EntryType.HEALTH_CHECK, init=False)


@dataclass(frozen=True)
class OccupationalHealthcareEntry:
    id: str
    date: str
    description: str
    specialist: str
    employer_name: str
    diagnosis_codes: list[str] = field(default_factory=list)
    sick_leave: Optional[SickLeave] = None
    type: EntryType = field(default=EntryType.OCCUPATIONAL_HEALTHCARE, init=False)


@dataclass(frozen=True)
class HospitalEntry:
    id: str
    date: str
    description: str
    specialist: str
    discharge: Discharge
    diagnosis_codes: list[str] = field(default_factory=list)
    type: EntryType = field(default=EntryType.HOSPITAL, init=False)


Entry = Union[HealthCheckEntry, OccupationalHealthcareEntry, HospitalEntry]


# ── Patient ──────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class NewPatient:
    """校验通过、尚未分配 id 的患者输入。entries 永远从空开始，不在这里出现。"""
    name: str
    gender: Gender
    occupation: str
    date_of_birth: Optional[str] = None
    ssn: Optional[str] = None


@dataclass
class Patient:
    id: str
    name: str
    gender: Gender
    occupation: str
    date_of_birth: Optional[str] = None
    ssn: Optional[str] = None
    entries: list[Entry] = field(default_factory=list)


@dataclass(frozen=True)
class PatientSummary:
    """列表视图：不带 entries。"""
    id: str
    name: str
    gender: Gender
    occupation: str
    date_of_birth: Optional[str] = None
    ssn: Optional[str] = None

    @classmethod
    def from_patient(cls, patient: Patient) -> "PatientSummary":
        return cls(
            id=patient.id,
            name=patient.name,
            gender=patient.gender,
            occupation=patient.occupation,
            date_of_birth=patient.date_of_birth,
            ssn=patient.ssn,
        )


@dataclass(frozen=True)
class Diagnosis:
    code: str
    name: str
    latin: Optional[str] = None
