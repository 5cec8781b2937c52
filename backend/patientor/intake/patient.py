"""
新建患者输入的校验。

和 Entry 不同，患者只有一种形状，不需要分发。
按 name → dateOfBirth → ssn → gender → occupation 的顺序校验，遇到第一个错误就抛。
"""

from collections.abc import Mapping
from typing import Any

from ..exceptions import ValidationError
from .types import Gender, NewPatient
from .validators import (
    validate_enum,
    validate_optional_date,
    validate_optional_text,
    validate_text,
)


def parse_new_patient(raw: Any) -> NewPatient:
    if not isinstance(raw, Mapping):
        raise ValidationError("Request body must be a JSON object", field=None)

    return NewPatient(
        name=validate_text(raw.get("name"), "name"),
        date_of_birth=validate_optional_date(raw.get("dateOfBirth"), "dateOfBirth"),
        ssn=validate_optional_text(raw.get("ssn"), "ssn"),
        gender=validate_enum(raw.get("gender"), Gender, "gender"),
        occupation=validate_text(raw.get("occupation"), "occupation"),
    )
