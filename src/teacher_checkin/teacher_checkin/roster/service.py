from __future__ import annotations

from typing import Optional

from ..common.validators import optional_text, require_non_empty
from ..core.exceptions import NotFoundError, ValidationError
from ..logging_config import get_logger
from .model import Classroom, Teacher
from .repository import RosterRepository

log = get_logger(__name__)


def _next_id(prefix: str, existing: list[str]) -> str:
    numbers = [int(i[len(prefix):]) for i in existing if i.startswith(prefix) and i[len(prefix):].isdigit()]
    return f"{prefix}{max(numbers, default=0) + 1:03d}"


class RosterService:
    """Use case: manage teacher and classroom records (admin)."""

    def __init__(self, roster: RosterRepository):
        self._roster = roster

    # --- teachers ---
    def list_teachers(self):
        return self._roster.list_teachers()

    def get_teacher(self, teacher_id: str) -> Teacher:
        teacher = self._roster.get_teacher(str(teacher_id))
        if not teacher:
            raise NotFoundError(f"Teacher {teacher_id} does not exist")
        return teacher

    def add_teacher(self, *, name: str, subject: Optional[str] = None, teacher_id: Optional[str] = None) -> Teacher:
        name = require_non_empty(name, "Teacher name")
        if teacher_id:
            teacher_id = require_non_empty(teacher_id, "Teacher id")
            if self._roster.get_teacher(teacher_id):
                raise ValidationError(f"Teacher {teacher_id} already exists")
        else:
            teacher_id = _next_id("T", [t.teacher_id for t in self._roster.list_teachers()])

        teacher = Teacher(teacher_id=teacher_id, name=name, subject=optional_text(subject, "Subject"))
        self._roster.save_teacher(teacher)
        log.info("teacher_added", teacher_id=teacher_id)
        return teacher

    def update_teacher(self, teacher_id: str, *, name: str, subject: Optional[str] = None) -> Teacher:
        current = self.get_teacher(teacher_id)
        teacher = Teacher(
            teacher_id=current.teacher_id,
            name=require_non_empty(name, "Teacher name"),
            subject=optional_text(subject, "Subject"),
        )
        self._roster.save_teacher(teacher)
        log.info("teacher_updated", teacher_id=teacher.teacher_id)
        return teacher

    def delete_teacher(self, teacher_id: str) -> None:
        if not self._roster.delete_teacher(str(teacher_id)):
            raise NotFoundError(f"Teacher {teacher_id} does not exist")
        log.info("teacher_deleted", teacher_id=teacher_id)

    # --- classrooms ---
    def list_classrooms(self, *, grade: Optional[int] = None):
        items = self._roster.list_classrooms()
        if grade is None:
            return items
        return [c for c in items if c.grade == int(grade)]

    def get_classroom(self, classroom_id: str) -> Classroom:
        classroom = self._roster.get_classroom(str(classroom_id))
        if not classroom:
            raise NotFoundError(f"Classroom {classroom_id} does not exist")
        return classroom

    def add_classroom(self, *, grade: int, section: str, subject: Optional[str] = None) -> Classroom:
        grade = self._validate_grade(grade)
        section = require_non_empty(section, "Section").upper()

        existing = self._roster.list_classrooms()
        if any(c.grade == grade and c.section == section for c in existing):
            raise ValidationError(f"Grade {grade}{section} already exists")

        classroom = Classroom(
            classroom_id=_next_id("C", [c.classroom_id for c in existing]),
            grade=grade,
            section=section,
            subject=optional_text(subject, "Subject"),
        )
        self._roster.save_classroom(classroom)
        log.info("classroom_added", classroom_id=classroom.classroom_id, name=classroom.name)
        return classroom

    def update_classroom(self, classroom_id: str, *, grade: int, section: str, subject: Optional[str] = None) -> Classroom:
        current = self.get_classroom(classroom_id)
        classroom = Classroom(
            classroom_id=current.classroom_id,
            grade=self._validate_grade(grade),
            section=require_non_empty(section, "Section").upper(),
            subject=optional_text(subject, "Subject"),
        )
        clash = [
            c
            for c in self._roster.list_classrooms()
            if c.classroom_id != classroom.classroom_id and c.name == classroom.name
        ]
        if clash:
            raise ValidationError(f"{classroom.name} already exists")

        self._roster.save_classroom(classroom)
        log.info("classroom_updated", classroom_id=classroom.classroom_id)
        return classroom

    def delete_classroom(self, classroom_id: str) -> None:
        if not self._roster.delete_classroom(str(classroom_id)):
            raise NotFoundError(f"Classroom {classroom_id} does not exist")
        log.info("classroom_deleted", classroom_id=classroom_id)

    @staticmethod
    def _validate_grade(grade) -> int:
        try:
            value = int(grade)
        except (TypeError, ValueError) as exc:
            raise ValidationError("Grade must be a number") from exc
        if value <= 0:
            raise ValidationError("Grade must be positive")
        return value
