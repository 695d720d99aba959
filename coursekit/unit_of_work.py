"""A unit of work that runs repositories inside one database transaction."""

from __future__ import annotations

import sqlite3
from collections.abc import Callable
from typing import Any

RepositoryFactory = Callable[[sqlite3.Connection], Any]


class TransactionError(Exception):
    """Raised when a transaction is misused or cannot be finished cleanly."""


class UnitOfWork:
    """Hands out repositories that share one transaction on a connection."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self.connection = connection
        self.repositories: dict[str, RepositoryFactory] = {}
        self._active = False

    @property
    def in_transaction(self) -> bool:
        """Whether a transaction started by this unit of work is open."""
        return self._active

    def _begin(self) -> None:
        self.connection.execute("BEGIN")
        self._active = True

    def register(self, name: str, factory: RepositoryFactory) -> None:
        """Make ``factory`` available as the repository called ``name``."""
        self.repositories[name] = factory

    def unregister(self, name: str) -> None:
        """Forget the repository called ``name``, if any."""
        self.repositories.pop(name, None)

    def get_repository(self, name: str) -> Any:
        """Build the repository called ``name``, starting a transaction if none is open."""
        try:
            factory = self.repositories[name]
        except KeyError:
            raise KeyError(f"no repository registered as {name!r}") from None
        if not self._active:
            self._begin()
        return factory(self.connection)

    def do(self, fn: Callable[[UnitOfWork], None]) -> None:
        """Run ``fn`` in a new transaction, committing on success and rolling back on error."""
        if self._active:
            raise TransactionError("transaction already started")
        self._begin()
        try:
            fn(self)
        except Exception as error:
            try:
                self.rollback()
            except (sqlite3.Error, TransactionError) as rollback_error:
                raise TransactionError(
                    f"original error: {error}, rollback error: {rollback_error}"
                ) from error
            raise
        self.commit_or_rollback()

    def rollback(self) -> None:
        """Undo the open transaction."""
        if not self._active:
            raise TransactionError("no transaction to rollback")
        self.connection.rollback()
        self._active = False

    def commit_or_rollback(self) -> None:
        """Commit the open transaction; if that fails, roll it back and re-raise."""
        if not self._active:
            raise TransactionError("no transaction to commit")
        try:
            self.connection.commit()
        except sqlite3.Error as error:
            try:
                self.rollback()
            except (sqlite3.Error, TransactionError) as rollback_error:
                raise TransactionError(
                    f"original error: {error}, rollback error: {rollback_error}"
                ) from error
            raise
        self._active = False