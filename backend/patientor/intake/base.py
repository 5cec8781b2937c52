"""
BaseEntryParser — 所有 Entry 变体 Parser 的抽象基类。

每个新 Entry 变体只需：
1. 继承 BaseEntryParser，声明 entry_type
2. 实现 build()
3. 在 factory.py 的 _build_registry() 注册一行

services / views 无需任何改动。
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Mapping

from .types import EntryBase, EntryType, Entry, new_id
from .validators import validate_date, validate_diagnosis_codes, validate_text


class BaseEntryParser(ABC):
    """
    两步流水线：parse_common → build

    parse_common() 校验四个公共字段，和变体无关；
    build() 由子类实现，只校验变体独有字段并组装最终记录。
    公共字段的错误一定先于变体字段的错误被报告。
    """

    # 子类声明自己对应的 type 标签（与 factory 注册键一致）
    entry_type: EntryType

    def __init__(self, raw: Mapping[str, Any], id_factory: Callable[[], str] = new_id):
        self._raw = raw
        self._id_factory = id_factory

    # ── 提供默认实现 ───────────────────────────────────────────────────────

    def parse_common(self) -> EntryBase:
        raw = self._raw
        return EntryBase(
            date=validate_date(raw.get("date"), "date"),
            description=validate_text(raw.get("description"), "description"),
            specialist=validate_text(raw.get("specialist"), "specialist"),
            diagnosis_codes=validate_diagnosis_codes(raw),
        )

    # ── 必须实现 ───────────────────────────────────────────────────────────

    @abstractmethod
    def build(self, common: EntryBase, entry_id: str) -> Entry:
        """
        校验 self._raw 中的变体字段，和 common 合并成具体 Entry。

        Raises:
            ValidationError: 变体字段缺失或非法
        """

    # ── 对外统一入口 ───────────────────────────────────────────────────────

    def process(self) -> Entry:
        """parse_common → build，返回带新 id 的 Entry。"""
        common = self.parse_common()
        return self.build(common, self._id_factory())
