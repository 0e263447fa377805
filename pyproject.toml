[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "carnetdb"
version = "0.1.0"
description = "SQLite-backed address book with interactions, to-do items and proleptic Julian calendar types"
requires-python = ">=3.10"
dependencies = []
keywords = ["contacts", "address book", "sqlite", "todo", "julian calendar"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Groupware",
    "Topic :: Database",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["carnetdb"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
