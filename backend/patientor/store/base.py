"""
BaseRecordStore — 所有患者存储后端的抽象基类。

每个新后端只需：
1. 继承 BaseRecordStore
2. 实现下面的抽象方法
3. 在 factory.py 的 _build_registry() 注册一行

services.py 完全不知道背后是内存还是数据库。
"""

from abc import ABC, abstractmethod
from typing import Optional

from ..intake.types import Entry, Patient


class BaseRecordStore(ABC):

    @abstractmethod
    def add_patient(self, patient: Patient) -> Patient:
        """
        写入一个新患者（连同已有 entries，按顺序）。

        Raises:
            ValueError: id 已存在
        """

    @abstractmethod
    def get_patient(self, patient_id: str) -> Optional[Patient]:
        """返回患者快照（entries 按写入顺序），不存在时返回 None。"""

    @abstractmethod
    def all_patients(self) -> list[Patient]:
        """按创建顺序返回全部患者快照。"""

    @abstractmethod
    def append_entry(self, patient_id: str, entry: Entry) -> Optional[Entry]:
        """
        把 entry 追加到患者 journal 末尾，返回存下来的 entry。

        患者不存在时返回 None，且不做任何写入。

        Raises:
            ValueError: entry id 已被使用
        """

    # ── 提供默认实现，子类可 override ──────────────────────────────────────

    def has_patient(self, patient_id: str) -> bool:
        return self.get_patient(patient_id) is not None

    def count(self) -> int:
        return len(self.all_patients())
