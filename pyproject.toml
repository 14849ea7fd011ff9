[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "casegen"
version = "0.1.0"
description = "Random test-case generators for programming contests: graphs, trees, point sets, range parsing, answer checkers and command helpers."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "competitive-programming",
    "test-generation",
    "random-graph",
    "random-tree",
    "checker",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Testing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["casegen"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
