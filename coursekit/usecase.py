"""Use cases that add a category and a course."""

from __future__ import annotations

from dataclasses import dataclass

from coursekit.entity import Category, Course
from coursekit.repository import CategoryRepository, CourseRepository
from coursekit.unit_of_work import UnitOfWork


@dataclass(frozen=True)
class CourseInput:
    """What is needed to add a category and a course."""

    category_name: str
    course_name: str
    course_category_id: int


class AddCourseUseCase:
    """Adds a category and then a course, each written on its own."""

    def __init__(
        self, course_repository: CourseRepository, category_repository: CategoryRepository
    ) -> None:
        self.course_repository = course_repository
        self.category_repository = category_repository

    def execute(self, input_data: CourseInput) -> None:
        """Store the category, then the course."""
        self.category_repository.insert(Category(name=input_data.category_name))
        self.course_repository.insert(
            Course(name=input_data.course_name, category_id=input_data.course_category_id)
        )


class AddCourseUseCaseUow:
    """Adds a category and a course in one unit of work: both are stored or neither."""

    def __init__(self, uow: UnitOfWork) -> None:
        self.uow = uow

    def execute(self, input_data: CourseInput) -> None:
        """Store the category and the course in a single transaction."""

        def work(uow: UnitOfWork) -> None:
            category_repository: CategoryRepository = uow.get_repository("CategoryRepository")
            category_repository.insert(Category(name=input_data.category_name))
            course_repository: CourseRepository = uow.get_repository("CourseRepository")
            course_repository.insert(
                Course(name=input_data.course_name, category_id=input_data.course_category_id)
            )

        self.uow.do(work)