[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "orderbag"
version = "0.1.0"
description = "A bag container with insertion, ascending, descending, reverse, side-cross and middle-out iteration orders."
requires-python = ">=3.10"
keywords = ["container", "iterator", "ordering", "multiset", "side-cross", "middle-out"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
orderbag-demo = "orderbag.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["orderbag"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
