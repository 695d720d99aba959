"""Typed queries over the categories and courses tables."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass
from typing import Any

from coursekit.catalog import RecordNotFoundError

_CREATE_CATEGORY = "INSERT INTO categories (id, name, description) VALUES (?, ?, ?)"
_CREATE_COURSE = (
    "INSERT INTO courses (id, name, description, category_id, price) VALUES (?, ?, ?, ?, ?)"
)
_DELETE_CATEGORY = "DELETE FROM categories WHERE id = ?"
_GET_CATEGORY = "SELECT id, name, description FROM categories WHERE id = ?"
_LIST_CATEGORIES = "SELECT id, name, description FROM categories"
_LIST_COURSES = (
    "SELECT c.id, c.category_id, c.name, c.description, c.price, ca.name AS category_name "
    "FROM courses c JOIN categories ca ON c.category_id = ca.id"
)
_UPDATE_CATEGORY = "UPDATE categories SET name = ?, description = ? WHERE id = ?"


@dataclass(frozen=True)
class Category:
    """A category row; the description may be absent."""

    id: str
    name: str
    description: str | None


@dataclass(frozen=True)
class Course:
    """A course row."""

    id: str
    category_id: str
    name: str
    description: str | None
    price: float


@dataclass(frozen=True)
class ListCoursesRow:
    """A course joined with the name of its category."""

    id: str
    category_id: str
    name: str
    description: str | None
    price: float
    category_name: str


@dataclass(frozen=True)
class CreateCategoryParams:
    """Values for a new category."""

    id: str
    name: str
    description: str | None = None


@dataclass(frozen=True)
class CreateCourseParams:
    """Values for a new course."""

    id: str
    name: str
    category_id: str
    price: float
    description: str | None = None


@dataclass(frozen=True)
class UpdateCategoryParams:
    """New values for an existing category."""

    id: str
    name: str
    description: str | None = None


class Queries:
    """Runs the queries on a connection.

    A write made outside a transaction is committed at once; a write made
    while the connection is inside a transaction is left to that transaction.
    """

    def __init__(self, connection: sqlite3.Connection) -> None:
        self.connection = connection

    def with_connection(self, connection: sqlite3.Connection) -> Queries:
        """Return the same queries bound to ``connection``."""
        return Queries(connection)

    def _execute(self, statement: str, parameters: tuple[Any, ...]) -> None:
        outside_transaction = not self.connection.in_transaction
        self.connection.execute(statement, parameters)
        if outside_transaction and self.connection.in_transaction:
            self.connection.commit()

    def create_category(self, params: CreateCategoryParams) -> None:
        """Insert a category."""
        self._execute(_CREATE_CATEGORY, (params.id, params.name, params.description))

    def create_course(self, params: CreateCourseParams) -> None:
        """Insert a course."""
        self._execute(
            _CREATE_COURSE,
            (params.id, params.name, params.description, params.category_id, params.price),
        )

    def delete_category(self, category_id: str) -> None:
        """Delete the category with ``category_id``, if any."""
        self._execute(_DELETE_CATEGORY, (category_id,))

    def get_category(self, category_id: str) -> Category:
        """Return the category with ``category_id``."""
        row = self.connection.execute(_GET_CATEGORY, (category_id,)).fetchone()
        if row is None:
            raise RecordNotFoundError(f"no category with id {category_id!r}")
        return Category(*row)

    def list_categories(self) -> list[Category]:
        """Return every category."""
        return [Category(*row) for row in self.connection.execute(_LIST_CATEGORIES)]

    def list_courses(self) -> list[ListCoursesRow]:
        """Return every course together with its category's name."""
        return [ListCoursesRow(*row) for row in self.connection.execute(_LIST_COURSES)]

    def update_category(self, params: UpdateCategoryParams) -> None:
        """Change the name and description of a category."""
        self._execute(_UPDATE_CATEGORY, (params.name, params.description, params.id))