"""
具体 Entry Parser 实现。

新增变体：在此文件添加一个类，然后在 factory.py 注册即可。

已注册变体：
  HealthCheck            — HealthCheckParser             (+ healthCheckRating 0..3)
  OccupationalHealthcare — OccupationalHealthcareParser  (+ employerName, 可选 sickLeave)
  Hospital               — HospitalParser                (+ discharge.date / discharge.criteria)
"""

from collections.abc import Mapping

from ..exceptions import ValidationError
from .base import BaseEntryParser
from .types import (
    Discharge,
    EntryBase,
    EntryType,
    HealthCheckEntry,
    HospitalEntry,
    OccupationalHealthcareEntry,
    SickLeave,
)
from .validators import (
    MISSING_FIELD,
    validate_date,
    validate_health_check_rating,
    validate_text,
)


# ── HealthCheckParser ──────────────────────────────────────────────────────
#
# 输入示例:
# {
#   "type": "HealthCheck",
#   "date": "2019-10-20",
#   "specialist": "MD House",
#   "description": "Yearly control visit. Cholesterol levels back to normal.",
#   "healthCheckRating": 0
# }
#
# 缺少 key 和值非法是两种不同的错误：
#   没有 healthCheckRating        → "Missing healthCheckRating"
#   healthCheckRating 不在 0..3   → "Invalid healthCheckRating"（null 也算这一种）

class HealthCheckParser(BaseEntryParser):
    entry_type = EntryType.HEALTH_CHECK

    def build(self, common: EntryBase, entry_id: str) -> HealthCheckEntry:
        if "healthCheckRating" not in self._raw:
            raise ValidationError(
                "Missing healthCheckRating", field="healthCheckRating", code=MISSING_FIELD,
            )
        rating = validate_health_check_rating(self._raw["healthCheckRating"])

        return HealthCheckEntry(
            id=entry_id,
            date=common.date,
            description=common.description,
            specialist=common.specialist,
            diagnosis_codes=common.diagnosis_codes,
            health_check_rating=rating,
        )


# ── OccupationalHealthcareParser ───────────────────────────────────────────
#
# 输入示例:
# {
#   "type": "OccupationalHealthcare",
#   "date": "2019-08-05",
#   "specialist": "MD House",
#   "employerName": "HyPD",
#   "diagnosisCodes": ["Z57.1", "Z74.3", "M51.2"],
#   "description": "Patient mistakenly found himself in a nuclear plant waiting room...",
#   "sickLeave": { "startDate": "2019-08-05", "endDate": "2019-08-28" }
# }
#
# sickLeave 的处理是不对称的（保留现有行为）：
#   1. startDate / endDate 只要缺一个 → 整个 sickLeave 被静默丢弃，不报错
#   2. 两个都有但任意一个不是合法日期 → ValidationError
#   3. 不检查 startDate <= endDate

class OccupationalHealthcareParser(BaseEntryParser):
    entry_type = EntryType.OCCUPATIONAL_HEALTHCARE

    def _sick_leave(self):
        sick_leave = self._raw.get("sickLeave")
        if not isinstance(sick_leave, Mapping):
            return None
        if not sick_leave.get("startDate") or not sick_leave.get("endDate"):
            return None
        return SickLeave(
            start_date=validate_date(sick_leave["startDate"], "sickLeave.startDate"),
            end_date=validate_date(sick_leave["endDate"], "sickLeave.endDate"),
        )

    def build(self, common: EntryBase, entry_id: str) -> OccupationalHealthcareEntry:
        employer_name = validate_text(self._raw.get("employerName"), "employerName")

        return OccupationalHealthcareEntry(
            id=entry_id,
            date=common.date,
            description=common.description,
            specialist=common.specialist,
            diagnosis_codes=common.diagnosis_codes,
            employer_name=employer_name,
            sick_leave=self._sick_leave(),
        )


# ── HospitalParser ─────────────────────────────────────────────────────────
#
# 输入示例:
# {
#   "type": "Hospital",
#   "date": "2015-01-02",
#   "specialist": "MD House",
#   "diagnosisCodes": ["S62.5"],
#   "description": "Healing time appr. 2 weeks. patient doesn't remember how he got the injury.",
#   "discharge": { "date": "2015-01-16", "criteria": "Thumb has healed." }
# }
#
# discharge 整体缺失、或 date / criteria 任意一个缺失，
# 统一报 "Missing discharge information"，不区分是哪个子字段。

class HospitalParser(BaseEntryParser):
    entry_type = EntryType.HOSPITAL

    def build(self, common: EntryBase, entry_id: str) -> HospitalEntry:
        discharge = self._raw.get("discharge")
        if (
            not isinstance(discharge, Mapping)
            or not discharge.get("date")
            or not discharge.get("criteria")
        ):
            raise ValidationError(
                "Missing discharge information", field="discharge", code="MISSING_DISCHARGE",
            )

        return HospitalEntry(
            id=entry_id,
            date=common.date,
            description=common.description,
            specialist=common.specialist,
            diagnosis_codes=common.diagnosis_codes,
            discharge=Discharge(
                date=validate_date(discharge["date"], "discharge.date"),
                criteria=validate_text(discharge["criteria"], "discharge.criteria"),
            ),
        )
