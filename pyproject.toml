[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "commonkit"
version = "0.1.0"
description = "Shared service building blocks: context-aware logging, scheduled-task commands and a Redis client facade."
requires-python = ">=3.10"
dependencies = [
    "redis",
]
keywords = ["logging", "redis", "cron", "cli", "commands", "toolkit"]
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
    "Topic :: System :: Logging",
    "Topic :: Database",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["commonkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
