from __future__ import annotations

from .model import Classroom, Teacher
from .repository import RosterRepository

DEMO_TEACHERS = (
    ("T001", "John Smith", "Mathematics"),
    ("T002", "Sarah Johnson", "Science"),
    ("T003", "Emily Davis", "English"),
    ("T004", "Michael Brown", "History"),
    ("T005", "Jessica Wilson", "Art"),
    ("T006", "David Martinez", "Physical Education"),
    ("T007", "Lisa Anderson", "Music"),
    ("T008", "Robert Taylor", "Computer Science"),
    ("T009", "Amanda White", "Geography"),
    ("T010", "James Lee", "Chemistry"),
)

DEMO_GRADES = (6, 7, 8, 9, 10, 11)
DEMO_SECTIONS = ("A", "B", "C", "D", "E1", "E2")


def seed_demo_roster(roster: RosterRepository) -> None:
    """Load demo teachers and classrooms (Grade 6A .. Grade 11E2)."""
    for teacher_id, name, subject in DEMO_TEACHERS:
        roster.save_teacher(Teacher(teacher_id=teacher_id, name=name, subject=subject))

    counter = 1
    for grade in DEMO_GRADES:
        for section in DEMO_SECTIONS:
            roster.save_classroom(
                Classroom(classroom_id=f"C{counter:03d}", grade=grade, section=section, subject="General")
            )
            counter += 1
