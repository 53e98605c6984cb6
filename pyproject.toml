[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsworkbench"
version = "0.1.0"
description = "Classic data structures, sorting algorithms and small console programs for study"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "algorithms",
    "sorting",
    "heap",
    "binary tree",
    "queue",
    "stack",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Environment :: Console",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dsworkbench-contact = "dsworkbench.contact:main"
dsworkbench-tictactoe = "dsworkbench.tictactoe:main"

[tool.hatch.build.targets.wheel]
packages = ["dsworkbench"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
