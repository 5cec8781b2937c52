"""
进程内存储：dict 按插入顺序保存患者。

Django 开发服务器是多线程的，所有写操作用一把锁串行化，
保证 entries 的追加顺序和 id 唯一性；读操作返回快照拷贝，不持有内部列表。
"""

import threading
from dataclasses import replace
from typing import Optional

from ..intake.types import Entry, Patient
from .base import BaseRecordStore


def _copy_entry(entry: Entry) -> Entry:
    # entry 本身是 frozen 的，但 diagnosis_codes 是 list，需要单独拷贝
    return replace(entry, diagnosis_codes=list(entry.diagnosis_codes))


def _snapshot(patient: Patient) -> Patient:
    return replace(patient, entries=[_copy_entry(e) for e in patient.entries])


class InMemoryRecordStore(BaseRecordStore):

    def __init__(self):
        self._patients: dict[str, Patient] = {}
        self._entry_ids: set[str] = set()
        self._lock = threading.Lock()

    def add_patient(self, patient: Patient) -> Patient:
        with self._lock:
            if patient.id in self._patients:
                raise ValueError(f"Patient id already in use: {patient.id!r}")
            entry_ids = [entry.id for entry in patient.entries]
            if len(set(entry_ids)) != len(entry_ids) or self._entry_ids.intersection(entry_ids):
                raise ValueError(f"Entry id already in use for patient {patient.id!r}")
            self._patients[patient.id] = _snapshot(patient)
            self._entry_ids.update(entry_ids)
        return _snapshot(patient)

    def get_patient(self, patient_id: str) -> Optional[Patient]:
        patient = self._patients.get(patient_id)
        return _snapshot(patient) if patient is not None else None

    def has_patient(self, patient_id: str) -> bool:
        return patient_id in self._patients

    def all_patients(self) -> list[Patient]:
        return [_snapshot(p) for p in list(self._patients.values())]

    def append_entry(self, patient_id: str, entry: Entry) -> Optional[Entry]:
        with self._lock:
            patient = self._patients.get(patient_id)
            if patient is None:
                return None
            if entry.id in self._entry_ids:
                raise ValueError(f"Entry id already in use: {entry.id!r}")
            # 整体替换列表，已经发出去的快照不受影响
            patient.entries = patient.entries + [_copy_entry(entry)]
            self._entry_ids.add(entry.id)
        return _copy_entry(entry)

    def count(self) -> int:
        return len(self._patients)
