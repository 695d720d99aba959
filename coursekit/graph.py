"""Resolvers for the category/course graph API."""

from __future__ import annotations

from dataclasses import dataclass

from coursekit.catalog import Category, CategoryDB, Course, CourseDB


@dataclass(frozen=True)
class CategoryModel:
    """A category as exposed by the API."""

    id: str
    name: str
    description: str | None = None

    @classmethod
    def from_record(cls, category: Category) -> CategoryModel:
        return cls(id=category.id, name=category.name, description=category.description)


@dataclass(frozen=True)
class CourseModel:
    """A course as exposed by the API."""

    id: str
    name: str
    description: str | None = None

    @classmethod
    def from_record(cls, course: Course) -> CourseModel:
        return cls(id=course.id, name=course.name, description=course.description)


@dataclass(frozen=True)
class NewCategory:
    """Input for creating a category."""

    name: str
    description: str | None = None


@dataclass(frozen=True)
class NewCourse:
    """Input for creating a course."""

    name: str
    category_id: str
    description: str | None = None


def _required_description(description: str | None) -> str:
    if description is None:
        raise ValueError("description is required")
    return description


class Resolver:
    """Answers queries and mutations from the category and course stores."""

    def __init__(self, category_db: CategoryDB, course_db: CourseDB) -> None:
        self.category_db = category_db
        self.course_db = course_db

    def categories(self) -> list[CategoryModel]:
        """Return every category."""
        return [CategoryModel.from_record(c) for c in self.category_db.find_all()]

    def courses(self) -> list[CourseModel]:
        """Return every course."""
        return [CourseModel.from_record(c) for c in self.course_db.find_all()]

    def category_courses(self, category: CategoryModel) -> list[CourseModel]:
        """Return the courses of ``category``."""
        return [CourseModel.from_record(c) for c in self.course_db.find_by_category_id(category.id)]

    def course_category(self, course: CourseModel) -> CategoryModel:
        """Return the category ``course`` belongs to."""
        return CategoryModel.from_record(self.category_db.find_by_course_id(course.id))

    def create_category(self, new_category: NewCategory) -> CategoryModel:
        """Store a new category and return it."""
        description = _required_description(new_category.description)
        return CategoryModel.from_record(self.category_db.create(new_category.name, description))

    def create_course(self, new_course: NewCourse) -> CourseModel:
        """Store a new course and return it."""
        description = _required_description(new_course.description)
        course = self.course_db.create(new_course.name, description, new_course.category_id)
        return CourseModel.from_record(course)