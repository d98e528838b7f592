[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "phpruntime"
version = "0.1.0"
description = "PHP runtime values, type conversions, comparison operators and variable-handling functions in pure Python"
requires-python = ">=3.10"
dependencies = []
keywords = ["php", "interpreter", "runtime", "type-juggling", "var_dump", "print_r"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["phpruntime"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
