[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nmtshell"
version = "0.1.0"
description = "A toy interactive shell over an in-memory tree of folders and files"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "filesystem", "in-memory", "toy", "repl"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
nmtshell = "nmtshell.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["nmtshell"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
