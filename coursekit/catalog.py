"""SQLite-backed storage for course categories and courses."""

from __future__ import annotations

import sqlite3
import uuid
from dataclasses import dataclass


@dataclass(frozen=True)
class Category:
    """A stored category."""

    id: str
    name: str
    description: str


@dataclass(frozen=True)
class Course:
    """A stored course belonging to a category."""

    id: str
    name: str
    description: str
    category_id: str


class RecordNotFoundError(LookupError):
    """Raised when a lookup matches no row."""


def create_schema(connection: sqlite3.Connection) -> None:
    """Create the categories and courses tables if they do not exist."""
    with connection:
        connection.execute(
            "CREATE TABLE IF NOT EXISTS categories "
            "(id TEXT PRIMARY KEY, name TEXT NOT NULL, description TEXT NOT NULL)"
        )
        connection.execute(
            "CREATE TABLE IF NOT EXISTS courses "
            "(id TEXT PRIMARY KEY, name TEXT NOT NULL, description TEXT NOT NULL, "
            "category_id TEXT NOT NULL REFERENCES categories(id))"
        )


class CategoryDB:
    """Reads and writes categories."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self._connection = connection

    def create(self, name: str, description: str) -> Category:
        """Insert a new category with a fresh UUID and return it."""
        category = Category(id=str(uuid.uuid4()), name=name, description=description)
        with self._connection:
            self._connection.execute(
                "INSERT INTO categories (id, name, description) VALUES (?, ?, ?)",
                (category.id, category.name, category.description),
            )
        return category

    def find_all(self) -> list[Category]:
        """Return every category."""
        rows = self._connection.execute("SELECT id, name, description FROM categories")
        return [Category(*row) for row in rows]

    def find_by_course_id(self, course_id: str) -> Category:
        """Return the category of the course with ``course_id``."""
        row = self._connection.execute(
            "SELECT c.id, c.name, c.description FROM categories c "
            "JOIN courses co ON c.id = co.category_id WHERE co.id = ?",
            (course_id,),
        ).fetchone()
        if row is None:
            raise RecordNotFoundError(f"no category for course {course_id!r}")
        return Category(*row)

    def find(self, category_id: str) -> Category:
        """Return the category with ``category_id``."""
        row = self._connection.execute(
            "SELECT name, description FROM categories WHERE id = ?", (category_id,)
        ).fetchone()
        if row is None:
            raise RecordNotFoundError(f"no category with id {category_id!r}")
        return Category(category_id, *row)


class CourseDB:
    """Reads and writes courses."""

    _COLUMNS = "id, name, description, category_id"

    def __init__(self, connection: sqlite3.Connection) -> None:
        self._connection = connection

    def create(self, name: str, description: str, category_id: str) -> Course:
        """Insert a new course with a fresh UUID and return it."""
        course = Course(
            id=str(uuid.uuid4()),
            name=name,
            description=description,
            category_id=category_id,
        )
        with self._connection:
            self._connection.execute(
                "INSERT INTO courses (id, name, description, category_id) VALUES (?, ?, ?, ?)",
                (course.id, course.name, course.description, course.category_id),
            )
        return course

    def find_all(self) -> list[Course]:
        """Return every course."""
        rows = self._connection.execute(f"SELECT {self._COLUMNS} FROM courses")
        return [Course(*row) for row in rows]

    def find_by_category_id(self, category_id: str) -> list[Course]:
        """Return the courses of the category with ``category_id``."""
        rows = self._connection.execute(
            f"SELECT {self._COLUMNS} FROM courses WHERE category_id = ?", (category_id,)
        )
        return [Course(*row) for row in rows]

    def find(self, course_id: str) -> Course:
        """Return the course with ``course_id``."""
        row = self._connection.execute(
            "SELECT name, description, category_id FROM courses WHERE id = ?", (course_id,)
        ).fetchone()
        if row is None:
            raise RecordNotFoundError(f"no course with id {course_id!r}")
        return Course(course_id, *row)