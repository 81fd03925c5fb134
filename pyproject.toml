[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kakeibo"
version = "0.1.0"
description = "A small household account book: record income and expenses and view monthly and yearly totals"
requires-python = ">=3.10"
dependencies = []
keywords = ["kakeibo", "household", "budget", "accounting", "finance"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Japanese",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Accounting",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
kakeibo = "kakeibo.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["kakeibo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
