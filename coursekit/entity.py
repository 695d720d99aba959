"""Domain entities for categories and their courses."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Category:
    """A category and the ids of the courses in it."""

    id: int = 0
    name: str = ""
    course_ids: list[int] = field(default_factory=list)

    def add_course(self, course_id: int) -> None:
        """Record that the course with ``course_id`` belongs to this category."""
        self.course_ids.append(course_id)


@dataclass
class Course:
    """A course belonging to a category."""

    id: int = 0
    name: str = ""
    category_id: int = 0