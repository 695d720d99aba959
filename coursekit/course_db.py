"""Creating a course and its category together in one transaction."""

from __future__ import annotations

import sqlite3
from collections.abc import Callable
from dataclasses import dataclass

from coursekit.queries import CreateCategoryParams, CreateCourseParams, Queries


@dataclass(frozen=True)
class CourseParams:
    """Values for a new course."""

    id: str
    name: str
    price: float
    description: str | None = None


@dataclass(frozen=True)
class CategoryParams:
    """Values for a new category."""

    id: str
    name: str
    description: str | None = None


class CourseDB(Queries):
    """Queries plus operations that span several statements in one transaction."""

    def _call_tx(self, fn: Callable[[Queries], None]) -> None:
        self.connection.execute("BEGIN")
        try:
            fn(self.with_connection(self.connection))
        except Exception as error:
            try:
                self.connection.rollback()
            except sqlite3.Error as rollback_error:
                raise RuntimeError(
                    f"error on rollback: {rollback_error}, original error: {error}"
                ) from error
            raise
        self.connection.commit()

    def create_course_and_category(self, category: CategoryParams, course: CourseParams) -> None:
        """Insert ``category`` and ``course`` in it; either both are stored or neither."""

        def create(queries: Queries) -> None:
            queries.create_category(
                CreateCategoryParams(category.id, category.name, category.description)
            )
            queries.create_course(
                CreateCourseParams(
                    id=course.id,
                    name=course.name,
                    category_id=category.id,
                    price=course.price,
                    description=course.description,
                )
            )

        self._call_tx(create)