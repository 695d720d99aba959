# coursekit

coursekit collects the pieces of a small course-catalogue application:
categories and courses stored in SQLite, a category service and graph
resolvers over those stores, an in-process event dispatcher, typed query
sets, and a unit of work that runs several repository writes in one
transaction.

It uses only the Python standard library and supports Python 3.10 and later.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

The `coursekit` command works on a SQLite database, `./data.db` by default
(change it with `--database PATH`). The `categories` and `courses` tables are
created when the database is opened.

Create a category:

```
coursekit category create --name Backend --description "Server-side courses"
coursekit category create -n Frontend -d "Browser courses"
```

`--name` and `--description` go together: giving only one of them is an
error. Giving neither creates a category with an empty name and description.

List categories:

```
coursekit category list
```

This prints `list called`, then one line per category: its id, name and
description separated by spaces.

`coursekit category` on its own prints the help for the category commands,
and `coursekit` on its own prints the general help. `-t/--toggle` is accepted
and has no effect.

The `coursekit-product` command opens `./test.db` (or `--database PATH`),
looks up product 1 through the product use case and prints its name:

```
coursekit-product
```

`ProductRepository` does not read the database: every product it returns is
named `Product Name`.

## Modules

| Module | What it provides |
| --- | --- |
| `coursekit.events` | `Event`, `EventHandler`, `EventDispatcher` and `HandlerAlreadyRegisteredError` |
| `coursekit.catalog` | `Category`, `Course`, the `CategoryDB` and `CourseDB` stores, `create_schema` and `RecordNotFoundError` |
| `coursekit.product` | `Product`, `ProductRepository`, `ProductUseCase`, `new_use_case` and `main` |
| `coursekit.grpc_service` | `CategoryService` with single and streaming category operations, plus `CategoryMessage`, `CreateCategoryRequest` and `CategoryList` |
| `coursekit.graph` | `Resolver` for categories and courses, with `CategoryModel`, `CourseModel`, `NewCategory` and `NewCourse` |
| `coursekit.cli` | `open_database`, `build_parser` and `main` behind the `coursekit` command |
| `coursekit.queries` | `Queries` for categories and courses with prices, with their parameter and row types |
| `coursekit.course_db` | `CourseDB.create_course_and_category`, which writes both records in one transaction |
| `coursekit.school_queries` | `Queries` that insert into integer-keyed categories and courses tables |
| `coursekit.entity` | `Category` and `Course` entities |
| `coursekit.repository` | `CategoryRepository` and `CourseRepository` |
| `coursekit.unit_of_work` | `UnitOfWork` and `TransactionError` |
| `coursekit.usecase` | `CourseInput`, `AddCourseUseCase` and `AddCourseUseCaseUow` |

## Events

Handlers are registered per event name and compared by identity. Registering
the same handler object twice for one name raises
`HandlerAlreadyRegisteredError`. `dispatch` runs every handler registered for
the event's name in its own thread and returns once all of them have
finished; if any handler raised, the first such exception in registration
order is raised again. `has`, `remove`, `clear` and `handlers_for` inspect and
change the registrations; removing a handler that is not registered does
nothing.

## Catalogue stores

`create_schema` prepares the `categories` and `courses` tables on a SQLite
connection. `CategoryDB` and `CourseDB` create records with fresh UUIDs and
look them up: all records, a category by one of its courses, the courses in
a category, or a single record by id. A single-record lookup that finds
nothing raises `RecordNotFoundError`.

`CategoryService` and `Resolver` sit on top of these stores. The resolver's
`create_category` and `create_course` raise `ValueError` when the
description is missing.

## Queries

`coursekit.queries.Queries` and `coursekit.school_queries.Queries` run fixed
statements on a connection. A write made outside a transaction is committed
at once; a write made inside an open transaction is left to it.
`coursekit.queries.Queries.get_category` raises `RecordNotFoundError` when
nothing matches. `CourseDB.create_course_and_category` stores a category and
a course in it, rolling back both if either insert fails.

## Unit of work

`UnitOfWork` holds repository factories by name; each factory receives the
connection. `get_repository` starts a transaction if none is open and raises
`KeyError` for an unknown name. `do` starts a transaction, calls the given
function and commits; if the function raises, the transaction is rolled back
and the error is passed on. Starting a second transaction while one is open,
or rolling back or committing when none is open, raises `TransactionError`.
`AddCourseUseCaseUow` uses it to insert a category and a course together,
while `AddCourseUseCase` inserts them one after the other through the
repositories directly.

## What it does not do

- There is no network server. `CategoryService` and `Resolver` are plain
  Python objects; serving them over RPC or a GraphQL endpoint is left to the
  caller.
- There is no message-queue producer or consumer; events are dispatched
  in-process only.
- Only `create_schema` creates tables, and only the `categories` and
  `courses` tables used by `coursekit.catalog`. The tables that
  `coursekit.queries`, `coursekit.course_db` and `coursekit.school_queries`
  write to (with a `price` column, or with integer ids) must be created by
  the caller.