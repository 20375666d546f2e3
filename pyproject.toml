[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "optifier"
version = "0.1.0b3"
description = "Generate partial counterparts of dataclasses, with every field optional, plus merge and checked conversion back"
requires-python = ">=3.10"
dependencies = []
keywords = ["partial", "optional", "dataclass", "configuration", "merge", "code generation"]
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
    "Topic :: Software Development :: Code Generators",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
optifier-playground = "optifier.playground:main"

[tool.hatch.build.targets.wheel]
packages = ["optifier"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
