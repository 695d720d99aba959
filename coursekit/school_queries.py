"""Typed insert queries over the integer-keyed categories and courses tables."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass
from typing import Any

_CREATE_CATEGORY = "INSERT INTO categories (id, name) VALUES (?, ?)"
_CREATE_COURSE = "INSERT INTO courses (id, name, category_id) VALUES (?, ?, ?)"


@dataclass(frozen=True)
class CreateCategoryParams:
    """Values for a new category; an id of ``None`` lets the database assign one."""

    name: str
    id: int | None = None


@dataclass(frozen=True)
class CreateCourseParams:
    """Values for a new course; an id of ``None`` lets the database assign one."""

    name: str
    category_id: int
    id: int | None = None


class Queries:
    """Runs the insert queries on a connection.

    A write made outside a transaction is committed at once; a write made
    while the connection is inside a transaction is left to that transaction.
    """

    def __init__(self, connection: sqlite3.Connection) -> None:
        self.connection = connection

    def _execute(self, statement: str, parameters: tuple[Any, ...]) -> None:
        outside_transaction = not self.connection.in_transaction
        self.connection.execute(statement, parameters)
        if outside_transaction and self.connection.in_transaction:
            self.connection.commit()

    def create_category(self, params: CreateCategoryParams) -> None:
        """Insert a category."""
        self._execute(_CREATE_CATEGORY, (params.id, params.name))

    def create_course(self, params: CreateCourseParams) -> None:
        """Insert a course."""
        self._execute(_CREATE_COURSE, (params.id, params.name, params.category_id))