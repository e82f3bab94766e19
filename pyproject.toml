[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsadrills"
version = "0.1.0"
description = "Small, tested solutions to classic recursion and array exercises."
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "recursion", "arrays", "exercises", "data-structures"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dsadrills"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
