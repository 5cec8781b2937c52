"""
Record Store Facade — 患者 / journal 的业务入口。

所有函数都接受可选的 store 参数；不传时使用 get_record_store() 返回的进程级实例。
这里只 raise（NotFoundError / ValidationError），不 catch，也不打日志：
View 层不需要处理，exception_handler 统一兜底。
"""

from typing import Any, Optional

from .diagnoses import catalog
from .exceptions import NotFoundError
from .intake import parse_entry, parse_new_patient
from .intake.types import Diagnosis, Entry, NewPatient, Patient, PatientSummary, new_id
from .store import BaseRecordStore, get_record_store


def _resolve(store: Optional[BaseRecordStore]) -> BaseRecordStore:
    return store if store is not None else get_record_store()


def create_patient(new_patient: NewPatient, store: Optional[BaseRecordStore] = None) -> Patient:
    """分配 id、entries 置空并写入 store。对合法的 NewPatient 总是成功。"""
    patient = Patient(
        id=new_id(),
        name=new_patient.name,
        gender=new_patient.gender,
        occupation=new_patient.occupation,
        date_of_birth=new_patient.date_of_birth,
        ssn=new_patient.ssn,
        entries=[],
    )
    return _resolve(store).add_patient(patient)


def get_patient(patient_id: str, store: Optional[BaseRecordStore] = None) -> Patient:
    """Get patient by ID. Raises NotFoundError if not found."""
    patient = _resolve(store).get_patient(patient_id)
    if patient is None:
        raise NotFoundError(id=patient_id)
    return patient


def list_patients(store: Optional[BaseRecordStore] = None) -> list[PatientSummary]:
    """全部患者的摘要视图（不含 entries），按创建顺序。"""
    return [PatientSummary.from_patient(p) for p in _resolve(store).all_patients()]


def append_entry(patient_id: str, entry: Entry, store: Optional[BaseRecordStore] = None) -> Entry:
    """
    追加 entry 到患者 journal 末尾（只追加，不改不删）。

    患者不存在 → NotFoundError，store 不发生任何变化。
    """
    stored = _resolve(store).append_entry(patient_id, entry)
    if stored is None:
        raise NotFoundError(id=patient_id)
    return stored


# ── 完整流水线：parse → commit ─────────────────────────────────────────────

def submit_patient(raw: Any, store: Optional[BaseRecordStore] = None) -> Patient:
    return create_patient(parse_new_patient(raw), store=store)


def submit_entry(patient_id: str, raw: Any, store: Optional[BaseRecordStore] = None) -> Entry:
    """
    先确认患者存在（404 优先于 400），再校验请求体并追加。
    """
    store = _resolve(store)
    if not store.has_patient(patient_id):
        raise NotFoundError(id=patient_id)
    entry = parse_entry(raw)
    return append_entry(patient_id, entry, store=store)


# ── 诊断目录 ──────────────────────────────────────────────────────────────

def list_diagnoses() -> list[Diagnosis]:
    return catalog.all()


def get_diagnosis(code: str) -> Optional[Diagnosis]:
    return catalog.lookup(code)
