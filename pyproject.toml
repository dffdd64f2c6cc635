[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kbase"
version = "0.1.0"
description = "Small building blocks for everyday Python code: string views, scope guards, binary pickles, LRU caches, brace-style formatting and more."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "lru-cache",
    "serialization",
    "string-format",
    "string-view",
    "scope-guard",
    "lazy",
    "utilities",
]
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
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["kbase"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
