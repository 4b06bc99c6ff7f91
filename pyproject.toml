[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sqlitecounters"
version = "0.1.0"
description = "A set of counters incremented in a background thread and saved to an SQLite database"
requires-python = ">=3.10"
dependencies = []
keywords = ["sqlite", "counters", "threading", "tkinter", "database"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: X11 Applications",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Front-Ends",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sqlitecounters = "sqlitecounters.app:main"

[tool.hatch.build.targets.wheel]
packages = ["sqlitecounters"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
