"""Category service: request/response messages and the operations behind them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from coursekit.catalog import Category, CategoryDB


@dataclass(frozen=True)
class CategoryMessage:
    """A category as sent back to clients."""

    id: str
    name: str
    description: str

    @classmethod
    def from_category(cls, category: Category) -> CategoryMessage:
        return cls(id=category.id, name=category.name, description=category.description)


@dataclass(frozen=True)
class CreateCategoryRequest:
    """A request to create one category."""

    name: str
    description: str


@dataclass
class CategoryList:
    """A list of categories."""

    categories: list[CategoryMessage] = field(default_factory=list)


class CategoryService:
    """Creates and reads categories through a category store."""

    def __init__(self, category_db: CategoryDB) -> None:
        self.category_db = category_db

    def _create(self, request: CreateCategoryRequest) -> CategoryMessage:
        category = self.category_db.create(request.name, request.description)
        return CategoryMessage.from_category(category)

    def create_category(self, request: CreateCategoryRequest) -> CategoryMessage:
        """Store a new category and return it."""
        return self._create(request)

    def list_categories(self) -> CategoryList:
        """Return every stored category."""
        return CategoryList(
            [CategoryMessage.from_category(category) for category in self.category_db.find_all()]
        )

    def get_category(self, category_id: str) -> CategoryMessage:
        """Return the category with ``category_id``."""
        return CategoryMessage.from_category(self.category_db.find(category_id))

    def create_category_stream(self, requests: Iterable[CreateCategoryRequest]) -> CategoryList:
        """Create a category for each request and return all of them once the stream ends."""
        return CategoryList([self._create(request) for request in requests])

    def create_category_stream_bidirectional(
        self, requests: Iterable[CreateCategoryRequest]
    ) -> Iterator[CategoryMessage]:
        """Create a category for each request, yielding each one as soon as it is stored."""
        for request in requests:
            yield self._create(request)