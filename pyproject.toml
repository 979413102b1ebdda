[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minilabs"
version = "0.1.0"
description = "Small teaching programs: a mark-and-sweep collector, two recursive-descent parsers and a fixed-slot account file"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "education",
    "garbage-collector",
    "mark-and-sweep",
    "recursive-descent",
    "parser",
    "lexer",
    "code-generation",
    "random-access-file",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Software Development :: Compilers",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
minilabs-gc = "minilabs.gc:main"
minilabs-decl = "minilabs.decl_parser:main"
minilabs-accounts = "minilabs.accounts:main"
minilabs-expr = "minilabs.expr_parser:main"

[tool.hatch.build.targets.wheel]
packages = ["minilabs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
