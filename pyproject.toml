[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hofkit"
version = "0.1.0"
description = "Higher-order function adaptors: first_of, if_, compose, rotate, proj, result, lazy and pipable"
requires-python = ">=3.10"
dependencies = []
keywords = ["functional", "higher-order", "adaptors", "compose", "pipe", "lazy", "bind"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hofkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
