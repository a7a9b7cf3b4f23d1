[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "simian"
version = "0.1.0"
description = "Runtime pieces for a small Monkey-style interpreter: tokens, objects, environments, built-in functions and JSON logging"
requires-python = ">=3.10"
dependencies = []
keywords = ["interpreter", "monkey", "language", "objects", "tokens"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["simian"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
