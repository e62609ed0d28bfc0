[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sqlprettify"
version = "0.1.0"
description = "A small SQL formatter that lays out SELECT, INSERT, UPDATE and DELETE statements with consistent indentation and keyword case."
requires-python = ">=3.10"
dependencies = []
keywords = ["sql", "formatter", "pretty-print", "beautifier"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Programming Language :: SQL",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Text Processing :: Filters",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sqlprettify = "sqlprettify.cli:main"
sqlprettify-demo = "sqlprettify.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["sqlprettify"]

[tool.pytest.ini_options]
addopts = "-ra"
