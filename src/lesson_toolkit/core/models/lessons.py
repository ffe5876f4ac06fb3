"""
Module: lessons

Purpose:
    Lessons and the assessments (pretests and posttests) attached to them.

Key Classes:
    - AssessmentKind: pretest / posttest
    - Lesson: A taught lesson for a grade
    - Assessment: A test, optionally linked to a lesson
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class AssessmentKind(str, Enum):
    """When a test is taken relative to its lesson."""

    PRETEST = "pretest"
    POSTTEST = "posttest"


@dataclass(frozen=True)
class Lesson:
    id: str
    title: str
    grade: str = ""

    @classmethod
    def from_record(cls, data: Dict[str, Any]) -> Lesson:
        return cls(
            id=str(data["id"]),
            title=data.get("title", ""),
            grade=data.get("grade", "") or "",
        )


@dataclass(frozen=True)
class Assessment:
    """
    A pretest or posttest.

    Attributes:
        id: Identity assigned by storage.
        title: Test title, embedded in generated placeholder questions.
        kind: AssessmentKind (plain strings are coerced).
        grade: Grade the test is set for.
        lesson_id: Lesson the test measures, if any.
    """

    id: str
    title: str
    kind: AssessmentKind
    grade: str = ""
    lesson_id: Optional[str] = None

    def __post_init__(self) -> None:
        # Frozen: coerce through object.__setattr__
        object.__setattr__(self, "kind", AssessmentKind(self.kind))

    @classmethod
    def from_record(cls, data: Dict[str, Any]) -> Assessment:
        return cls(
            id=str(data["id"]),
            title=data.get("title", ""),
            kind=data["type"] if "type" in data else data["kind"],
            grade=data.get("grade", "") or "",
            lesson_id=data.get("lesson_id"),
        )
