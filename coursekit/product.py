"""Product lookup wired through a repository and a use case."""

from __future__ import annotations

import argparse
import sqlite3
from contextlib import closing
from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class Product:
    """A product with an id and a name."""

    id: int
    name: str


class ProductRepositoryInterface(Protocol):
    """Source of products."""

    def get_product(self, product_id: int) -> Product:
        """Return the product with ``product_id``."""


class ProductRepository:
    """Repository over a database connection; every product has a fixed name."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self._connection = connection

    def get_product(self, product_id: int) -> Product:
        """Return the product with ``product_id``."""
        return Product(id=product_id, name="Product Name")


class ProductUseCase:
    """Fetches products through a repository."""

    def __init__(self, repository: ProductRepositoryInterface) -> None:
        self._repository = repository

    def get_product(self, product_id: int) -> Product:
        """Return the product with ``product_id`` from the repository."""
        return self._repository.get_product(product_id)


def new_use_case(connection: sqlite3.Connection) -> ProductUseCase:
    """Build a use case backed by a repository on ``connection``."""
    return ProductUseCase(ProductRepository(connection))


def main(argv: list[str] | None = None) -> int:
    """Print the name of product 1."""
    parser = argparse.ArgumentParser(prog="product", description="Print the name of product 1.")
    parser.add_argument("--database", default="./test.db", help="SQLite database file")
    args = parser.parse_args(argv)

    with closing(sqlite3.connect(args.database)) as connection:
        product = new_use_case(connection).get_product(1)
        print(product.name)
    return 0