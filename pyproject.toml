[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gamecatalog"
version = "0.1.0"
description = "A small JSON web service for a catalogue of games and their creators"
requires-python = ">=3.10"
keywords = ["games", "catalog", "rest", "json", "flask", "sqlite", "migrations"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
    "Topic :: Database",
]
dependencies = [
    "flask>=2.2",
    "python-dotenv>=1.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[project.scripts]
gamecatalog = "gamecatalog.server:main"
gamecatalog-migrate = "gamecatalog.migrations:main"

[tool.hatch.build.targets.wheel]
packages = ["gamecatalog"]

[tool.hatch.build.targets.sdist]
include = ["gamecatalog", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
