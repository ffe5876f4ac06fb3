"""
Module: scoring.attendance

Purpose:
    Reduces attendance records to present/absent/late counts and an
    attendance rate. Only "present" counts towards the rate; "late" is
    reported separately and counts as not present.

Key Functions:
    - attendance_stats(): Stats over any list of records
    - attendance_stats_for_student(): Stats for one student's records
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable

from lesson_toolkit.common.numbers import percentage
from lesson_toolkit.core.models.attendance import AttendanceRecord, AttendanceStats, AttendanceStatus


def attendance_stats(records: Iterable[AttendanceRecord]) -> AttendanceStats:
    """
    Count statuses and compute the attendance rate.

    Example:
        >>> stats = attendance_stats(records)  # 7 present, 2 absent, 1 late
        >>> stats.rate
        70
    """
    counts = Counter(AttendanceStatus(r.status) for r in records)
    present = counts[AttendanceStatus.PRESENT]
    total = sum(counts.values())
    return AttendanceStats(
        present=present,
        absent=counts[AttendanceStatus.ABSENT],
        late=counts[AttendanceStatus.LATE],
        total=total,
        rate=percentage(present, total),
    )


def attendance_stats_for_student(
    records: Iterable[AttendanceRecord],
    student_id: str,
) -> AttendanceStats:
    return attendance_stats(r for r in records if r.student_id == student_id)
