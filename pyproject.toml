[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kanbantui"
version = "0.1.6"
description = "Screen model for a terminal kanban board: tasks, columns, sprints and views"
requires-python = ">=3.10"
dependencies = []
keywords = ["kanban", "tui", "terminal", "project-management", "sprints"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["kanbantui"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
