[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cmmtree"
version = "0.1.0"
description = "Abstract syntax tree for the C-- language, with a source printer and a Python code generator"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "ast", "c--", "code-generation", "pretty-printer"]
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
    "Topic :: Software Development :: Compilers",
    "Topic :: Software Development :: Code Generators",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cmmtree"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
