from coursekit.entity import Category, Course


def test_add_course_appends_in_order():
    category = Category(id=1, name="Backend")
    category.add_course(10)
    category.add_course(4)
    assert category.course_ids == [10, 4]


def test_new_category_has_no_courses():
    assert Category(name="Empty").course_ids == []


def test_categories_do_not_share_course_lists():
    first = Category(name="First")
    second = Category(name="Second")
    first.add_course(8)
    assert second.course_ids == []
    assert first.course_ids == [8]


def test_add_course_keeps_duplicates():
    category = Category()
    category.add_course(2)
    category.add_course(2)
    assert category.course_ids == [2, 2]


def test_course_fields():
    course = Course(id=3, name="Go", category_id=1)
    assert (course.id, course.name, course.category_id) == (3, "Go", 1)