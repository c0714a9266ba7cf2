[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "drillkit"
version = "0.1.0"
description = "Small, dependable routines for numbers, lists, matrices, text and people records"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "sorting",
    "binary-search",
    "gcd",
    "lcm",
    "primes",
    "matrix",
    "palindrome",
    "exercises",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
drillkit = "drillkit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["drillkit"]

[tool.hatch.build.targets.sdist]
include = ["drillkit", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
