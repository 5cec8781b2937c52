"""
字段级校验器（Parser 可直接复用）。

全部是纯函数：输入一个未定型的值 + 字段名，返回定型后的值，
或者 raise ValidationError(field=..., message=...)。第一个错误就抛，不做聚合。
"""

from enum import Enum
from typing import Any, Mapping, Optional

from django.utils.dateparse import parse_date, parse_datetime

from ..exceptions import ValidationError
from .types import HealthCheckRating

MISSING_FIELD = "MISSING_FIELD"
INVALID_FIELD = "INVALID_FIELD"


def is_date(text: str) -> bool:
    """ISO 日期（YYYY-MM-DD）或 ISO datetime，且必须是真实存在的日历日期。"""
    try:
        return (parse_date(text) or parse_datetime(text)) is not None
    except ValueError:
        # 格式对但日期不存在，例如 2024-02-30
        return False


def validate_text(value: Any, field: str) -> str:
    # 只拒绝空串；纯空白串算非空
    if not value or not isinstance(value, str):
        raise ValidationError(f"Incorrect or missing {field}", field=field, code=MISSING_FIELD)
    return value


def validate_date(value: Any, field: str) -> str:
    """必填日期。返回原始文本，不做归一化。"""
    if not value or not isinstance(value, str) or not is_date(value):
        raise ValidationError(f"Incorrect or missing {field}", field=field, code=INVALID_FIELD)
    return value


def validate_optional_date(value: Any, field: str) -> Optional[str]:
    """
    可选日期：
      None / 非字符串       → None
      trim 后为空           → None
      trim 后不是合法日期   → ValidationError
    返回 trim 后的文本。
    """
    if value is None or not isinstance(value, str):
        return None
    text = value.strip()
    if text == "":
        return None
    if not is_date(text):
        raise ValidationError(f"Incorrect {field}", field=field, code=INVALID_FIELD)
    return text


def validate_optional_text(value: Any, field: str) -> Optional[str]:
    """可选的不透明文本（例如 ssn），不做格式检查。"""
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"Incorrect {field}", field=field, code=INVALID_FIELD)
    return value


def validate_enum(value: Any, enum_cls: type[Enum], field: str):
    allowed = {member.value for member in enum_cls}
    if not value or not isinstance(value, str) or value not in allowed:
        raise ValidationError(
            f"Incorrect or missing {field}",
            field=field,
            code=INVALID_FIELD,
            detail={"field": field, "allowed": sorted(allowed)},
        )
    return enum_cls(value)


def validate_health_check_rating(value: Any) -> HealthCheckRating:
    field = "healthCheckRating"
    # bool 是 int 的子类，True 不能被当成 1
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"Invalid {field}", field=field, code=INVALID_FIELD)
    # 2.0 和 2 是同一个 JSON 数字；1.5、-1、4 都不在集合里
    if value not in (0, 1, 2, 3):
        raise ValidationError(f"Invalid {field}", field=field, code=INVALID_FIELD)
    return HealthCheckRating(int(value))


def validate_diagnosis_codes(raw: Mapping[str, Any]) -> list[str]:
    """
    诊断代码：缺省 / null → []；必须是数组，元素原样透传（不和诊断目录交叉校验）。
    """
    field = "diagnosisCodes"
    codes = raw.get(field)
    if codes is None:
        return []
    # 字符串、数字、对象都不是数组；"A1" 不能被拆成 ["A", "1"]
    if not isinstance(codes, (list, tuple)):
        raise ValidationError(f"Incorrect {field}", field=field, code=INVALID_FIELD)
    return list(codes)
