from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Teacher:
    """Domain entity: a teacher who checks in to classes."""

    teacher_id: str
    name: str
    subject: Optional[str] = None


@dataclass(frozen=True)
class Classroom:
    """Domain entity: a classroom with its own QR code."""

    classroom_id: str
    grade: int
    section: str
    subject: Optional[str] = None

    @property
    def name(self) -> str:
        return f"Grade {self.grade}{self.section}"
