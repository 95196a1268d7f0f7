[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsalgo"
version = "0.1.0"
description = "Classic data structures and algorithms: lists, stacks, queues, hash maps, trees, sorting, string search, backtracking and dynamic programming."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "algorithms",
    "linked list",
    "hash map",
    "binary tree",
    "binary search tree",
    "kmp",
    "dynamic programming",
    "backtracking",
    "sorting",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dsalgo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
