[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "disa"
version = "0.1.0"
description = "A streaming tokenizer for a small subset of the C language"
requires-python = ">=3.10"
dependencies = []
keywords = ["tokenizer", "lexer", "c", "compiler"]
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
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["disa"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
