from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Classroom, Teacher


class RosterRepository(Protocol):
    """Repository interface for teachers and classrooms.

    Note: services depend on this interface, not on a concrete store.
    """

    def get_teacher(self, teacher_id: str) -> Optional[Teacher]:
        raise NotImplementedError

    def list_teachers(self) -> Sequence[Teacher]:
        raise NotImplementedError

    def save_teacher(self, teacher: Teacher) -> None:
        raise NotImplementedError

    def delete_teacher(self, teacher_id: str) -> bool:
        raise NotImplementedError

    def get_classroom(self, classroom_id: str) -> Optional[Classroom]:
        raise NotImplementedError

    def list_classrooms(self) -> Sequence[Classroom]:
        raise NotImplementedError

    def save_classroom(self, classroom: Classroom) -> None:
        raise NotImplementedError

    def delete_classroom(self, classroom_id: str) -> bool:
        raise NotImplementedError
