[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cntshop"
version = "0.1.0"
description = "The Continente supermarket category catalogue as a Python library, with lookup by id or name and table, JSON and compact rendering"
requires-python = ">=3.11"
dependencies = []
keywords = ["continente", "supermarket", "categories", "catalogue", "groceries"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Natural Language :: English",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cntshop"]

[tool.hatch.build.targets.sdist]
include = ["cntshop", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.11"
strict = true
