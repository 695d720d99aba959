"""Course catalogue building blocks: events, SQLite stores, services, resolvers and transactions."""

__version__ = "0.1.0"