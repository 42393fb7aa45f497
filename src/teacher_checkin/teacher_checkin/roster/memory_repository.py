from __future__ import annotations

import threading
from typing import Optional, Sequence

from .model import Classroom, Teacher
from .repository import RosterRepository


class InMemoryRosterRepository(RosterRepository):
    def __init__(self):
        self._lock = threading.Lock()
        self._teachers: dict[str, Teacher] = {}
        self._classrooms: dict[str, Classroom] = {}

    def get_teacher(self, teacher_id: str) -> Optional[Teacher]:
        with self._lock:
            return self._teachers.get(teacher_id)

    def list_teachers(self) -> Sequence[Teacher]:
        with self._lock:
            return sorted(self._teachers.values(), key=lambda t: t.teacher_id)

    def save_teacher(self, teacher: Teacher) -> None:
        with self._lock:
            self._teachers[teacher.teacher_id] = teacher

    def delete_teacher(self, teacher_id: str) -> bool:
        with self._lock:
            return self._teachers.pop(teacher_id, None) is not None

    def get_classroom(self, classroom_id: str) -> Optional[Classroom]:
        with self._lock:
            return self._classrooms.get(classroom_id)

    def list_classrooms(self) -> Sequence[Classroom]:
        with self._lock:
            return sorted(self._classrooms.values(), key=lambda c: c.classroom_id)

    def save_classroom(self, classroom: Classroom) -> None:
        with self._lock:
            self._classrooms[classroom.classroom_id] = classroom

    def delete_classroom(self, classroom_id: str) -> bool:
        with self._lock:
            return self._classrooms.pop(classroom_id, None) is not None
