[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "coursekit"
version = "0.1.0"
description = "Building blocks for a course catalogue: event dispatching, SQLite-backed stores, category services, graph resolvers, a unit of work and a small command line."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "events",
    "dispatcher",
    "repository",
    "unit-of-work",
    "sqlite",
    "catalog",
    "courses",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
coursekit = "coursekit.cli:main"
coursekit-product = "coursekit.product:main"

[tool.hatch.build.targets.wheel]
packages = ["coursekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
