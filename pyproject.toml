[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wirestring"
version = "0.1.0"
description = "A mutable string type with microcontroller-style semantics, number formatting helpers and binary constants"
requires-python = ">=3.10"
dependencies = []
keywords = ["string", "embedded", "dtostrf", "itoa", "atol", "atof", "microcontroller"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["wirestring"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
