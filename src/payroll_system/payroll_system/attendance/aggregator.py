from __future__ import annotations

from decimal import Decimal
from typing import Iterable

from ..common.money import ZERO, to_decimal
from ..core.constants import COMMENT_SEPARATOR
from .model import AttendanceRecord, AttendanceSummary

_SUMMED_FIELDS = (
    "working_days",
    "present_days",
    "absent_days",
    "ot_hours_normal",
    "ot_hours_friday",
    "ot_hours_holiday",
    "dues_earned",
)


def aggregate_attendance(records: Iterable[AttendanceRecord]) -> AttendanceSummary:
    """Fold one employee's rows for a month into a single summary.

    Every numeric field is summed. round_off is summed over the rows that carry
    it. Non-empty comments are joined with "; " in row order.

    Raises ValidationError if a row holds a non-numeric value.
    """
    totals: dict[str, Decimal] = {name: ZERO for name in _SUMMED_FIELDS}
    round_off_total = ZERO
    comments: list[str] = []
    count = 0

    for rec in records:
        count += 1
        for name in _SUMMED_FIELDS:
            totals[name] += to_decimal(getattr(rec, name), name)

        round_off = to_decimal(rec.round_off, "round_off")
        if round_off > 0:
            round_off_total += round_off

        note = (rec.comments or "").strip()
        if note:
            comments.append(note)

    return AttendanceSummary(
        record_count=count,
        round_off_total=round_off_total,
        comments=COMMENT_SEPARATOR.join(comments),
        **totals,
    )


def group_by_employee(records: Iterable[AttendanceRecord], *, month: str) -> dict[str, list[AttendanceRecord]]:
    """Bucket rows by emp_id, keeping only rows whose month key matches exactly."""
    grouped: dict[str, list[AttendanceRecord]] = {}
    for rec in records:
        if rec.month != month:
            continue
        grouped.setdefault(rec.emp_id, []).append(rec)
    return grouped
