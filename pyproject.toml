[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "macrotoys"
version = "0.1.0"
description = "Variadic argument-list utilities and generators for C preprocessor macro headers"
requires-python = ">=3.10"
keywords = ["preprocessor", "macros", "variadic", "code generation", "header"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Environment :: Console",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Code Generators",
    "Topic :: Software Development :: Pre-processors",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
macrotoys = "macrotoys.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["macrotoys"]

[tool.pytest.ini_options]
addopts = "-ra"
