"""Repositories that store category and course entities."""

from __future__ import annotations

import sqlite3

from coursekit.entity import Category, Course
from coursekit.school_queries import CreateCategoryParams, CreateCourseParams, Queries


class CategoryRepository:
    """Stores categories; the database assigns their ids."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self.connection = connection
        self.queries = Queries(connection)

    def insert(self, category: Category) -> None:
        """Store ``category`` by name."""
        self.queries.create_category(CreateCategoryParams(name=category.name))


class CourseRepository:
    """Stores courses; the database assigns their ids."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self.connection = connection
        self.queries = Queries(connection)

    def insert(self, course: Course) -> None:
        """Store ``course`` with its name and category id."""
        self.queries.create_course(
            CreateCourseParams(name=course.name, category_id=course.category_id)
        )