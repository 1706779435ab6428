[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "etranspile"
version = "0.1.0"
description = "Front end of a small transpiler: scans the tag lines of source files, follows includes and tracks project state"
requires-python = ">=3.10"
dependencies = []
keywords = ["transpiler", "compiler", "preprocessor", "tags"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
etranspile = "etranspile.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["etranspile"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
