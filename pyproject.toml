[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "numconv"
version = "0.1.0"
description = "Integer-to-text conversion in any radix and fixed-width float formatting, with 32-bit microcontroller semantics"
requires-python = ">=3.10"
dependencies = []
keywords = ["itoa", "ltoa", "utoa", "ultoa", "dtostrf", "radix", "embedded", "number formatting"]
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
    "Topic :: Software Development :: Embedded Systems",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["numconv"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
