[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "threadkit"
version = "0.1.0"
description = "Small threading utilities: a thread-safe stack, joining thread handles, lock-ordering helpers and a parallel accumulate."
requires-python = ">=3.10"
dependencies = []
keywords = ["threading", "concurrency", "locks", "stack", "parallel"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
threadkit-stack = "threadkit.stack:main"
threadkit-locking = "threadkit.locking:main"
threadkit-accumulate = "threadkit.accumulate:main"

[tool.hatch.build.targets.wheel]
packages = ["threadkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
