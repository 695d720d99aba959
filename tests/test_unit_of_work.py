import sqlite3

import pytest

from coursekit.unit_of_work import TransactionError, UnitOfWork


@pytest.fixture
def connection():
    conn = sqlite3.connect(":memory:")
    conn.execute("CREATE TABLE items (name TEXT NOT NULL)")
    conn.commit()
    yield conn
    conn.close()


class _FailingConnection:
    def __init__(self):
        self.statements = []

    def execute(self, statement, *args):
        self.statements.append(statement)

    def commit(self):
        raise sqlite3.OperationalError("commit failed")

    def rollback(self):
        raise sqlite3.OperationalError("rollback failed")


def _count(conn):
    return conn.execute("SELECT COUNT(*) FROM items").fetchone()[0]


def test_do_commits_on_success(connection):
    uow = UnitOfWork(connection)
    uow.do(lambda u: u.connection.execute("INSERT INTO items VALUES ('a')"))
    assert not uow.in_transaction
    connection.rollback()
    assert _count(connection) == 1


def test_do_rolls_back_and_reraises(connection):
    uow = UnitOfWork(connection)

    def fail(u):
        u.connection.execute("INSERT INTO items VALUES ('a')")
        raise ValueError("boom")

    with pytest.raises(ValueError, match="boom"):
        uow.do(fail)
    assert not uow.in_transaction
    assert _count(connection) == 0


def test_nested_do_is_rejected(connection):
    uow = UnitOfWork(connection)
    errors = []
    states = []

    def outer(u):
        u.connection.execute("INSERT INTO items VALUES ('outer')")
        try:
            u.do(lambda inner: None)
        except TransactionError as error:
            errors.append(str(error))
        states.append(u.in_transaction)

    uow.do(outer)
    assert errors == ["transaction already started"]
    assert states == [True]
    assert not uow.in_transaction
    connection.rollback()
    assert _count(connection) == 1


def test_rollback_without_transaction_raises(connection):
    with pytest.raises(TransactionError, match="no transaction to rollback"):
        UnitOfWork(connection).rollback()


def test_get_repository_starts_transaction_and_passes_connection(connection):
    uow = UnitOfWork(connection)
    received = []
    uow.register("Items", lambda conn: received.append(conn) or "repo")
    assert uow.get_repository("Items") == "repo"
    assert received == [connection]
    assert uow.in_transaction
    uow.rollback()
    assert not uow.in_transaction


def test_commit_or_rollback_after_get_repository(connection):
    uow = UnitOfWork(connection)
    uow.register("Items", lambda conn: conn)
    conn = uow.get_repository("Items")
    conn.execute("INSERT INTO items VALUES ('kept')")
    uow.commit_or_rollback()
    connection.rollback()
    assert _count(connection) == 1


def test_unregister_removes_factory(connection):
    uow = UnitOfWork(connection)
    uow.register("Items", lambda conn: conn)
    uow.unregister("Items")
    with pytest.raises(KeyError):
        uow.get_repository("Items")
    assert not uow.in_transaction


def test_failed_rollback_combines_errors():
    uow = UnitOfWork(_FailingConnection())

    def fail(u):
        raise ValueError("boom")

    with pytest.raises(TransactionError) as info:
        uow.do(fail)
    assert str(info.value) == "original error: boom, rollback error: rollback failed"


def test_failed_commit_and_rollback_combines_errors():
    fake = _FailingConnection()
    uow = UnitOfWork(fake)
    with pytest.raises(TransactionError) as info:
        uow.do(lambda u: None)
    assert str(info.value) == "original error: commit failed, rollback error: rollback failed"
    assert fake.statements == ["BEGIN"]