"""
Module: attendance

Purpose:
    Attendance events and the derived statistics computed from them.

Key Classes:
    - AttendanceStatus: present / absent / late
    - AttendanceRecord: One student's status on one date
    - AttendanceStats: Counts plus attendance rate
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict


class AttendanceStatus(str, Enum):
    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"


@dataclass(frozen=True)
class AttendanceRecord:
    """
    A student's attendance on a given date.

    (student_id, date) is the storage upsert key; see
    ``core.utils.serialization.attendance_upsert_key``.

    Attributes:
        student_id: Student the record belongs to.
        date: ISO date string (YYYY-MM-DD).
        status: AttendanceStatus (plain strings are coerced).
    """

    student_id: str
    date: str
    status: AttendanceStatus

    def __post_init__(self) -> None:
        try:
            status = AttendanceStatus(self.status)
        except ValueError:
            raise ValueError(f"Invalid attendance status: {self.status!r}") from None
        object.__setattr__(self, "status", status)

    def to_record(self) -> Dict[str, Any]:
        return {
            "student_id": self.student_id,
            "date": self.date,
            "status": self.status.value,
        }

    @classmethod
    def from_record(cls, data: Dict[str, Any]) -> AttendanceRecord:
        return cls(
            student_id=str(data.get("student_id", "")),
            date=str(data.get("date", "")),
            status=data["status"],
        )


@dataclass(frozen=True)
class AttendanceStats:
    """
    Attendance counts and rate.

    Attributes:
        present: Number of present records.
        absent: Number of absent records.
        late: Number of late records.
        total: Number of records.
        rate: Half-up rounded percentage of present over total, 0 when empty.
    """

    present: int = 0
    absent: int = 0
    late: int = 0
    total: int = 0
    rate: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {
            "present": self.present,
            "absent": self.absent,
            "late": self.late,
            "total": self.total,
            "rate": self.rate,
        }
