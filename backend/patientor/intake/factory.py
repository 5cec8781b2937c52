"""
Entry 分发：根据原始输入里的 type 字段选出对应的 Parser。

新增 Entry 变体只需：
  1. 在 parsers.py 新建 Parser 类
  2. 在此处 _build_registry() 加一行
  不需要修改任何业务代码。这里是变体穷举的唯一位置。
"""

from collections.abc import Mapping
from typing import Any, Callable

from ..exceptions import ValidationError
from .base import BaseEntryParser
from .types import Entry, EntryType, new_id


# ── 注册表 ──────────────────────────────────────────────────────────────────
# key: type 标签字符串（来自请求体的 "type" 字段）
# value: Parser 类（未实例化）
def _build_registry() -> dict[str, type[BaseEntryParser]]:
    # 延迟导入，避免循环依赖
    from .parsers import HealthCheckParser, HospitalParser, OccupationalHealthcareParser

    return {
        EntryType.HEALTH_CHECK.value:            HealthCheckParser,
        EntryType.OCCUPATIONAL_HEALTHCARE.value: OccupationalHealthcareParser,
        EntryType.HOSPITAL.value:                HospitalParser,
    }


def known_entry_types() -> list[str]:
    return list(_build_registry().keys())


def get_parser(raw: Any, id_factory: Callable[[], str] = new_id) -> BaseEntryParser:
    """
    根据 raw["type"] 返回已实例化的 Parser。

    Args:
        raw:        未校验的请求体（通常是 request.data）
        id_factory: Entry id 生成器，测试可注入固定值

    Raises:
        ValidationError: type 缺失、不是字符串、或不是已注册的变体
    """
    registry = _build_registry()
    entry_type = raw.get("type") if isinstance(raw, Mapping) else None
    parser_cls = registry.get(entry_type) if isinstance(entry_type, str) else None

    if parser_cls is None:
        raise ValidationError(
            message="Unknown or missing entry type",
            field="type",
            code="UNKNOWN_ENTRY_TYPE",
            detail={"field": "type", "known_types": list(registry.keys())},
        )

    return parser_cls(raw=raw, id_factory=id_factory)


def parse_entry(raw: Any, id_factory: Callable[[], str] = new_id) -> Entry:
    """type 分发 → 公共字段 → 变体字段，返回带新 id 的 Entry。"""
    return get_parser(raw, id_factory=id_factory).process()
