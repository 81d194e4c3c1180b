[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "attackrecords"
version = "0.1.0"
description = "Build, list and search binary files of cyber-attack records read from CSV"
requires-python = ">=3.10"
dependencies = []
keywords = ["binary file", "records", "csv", "database", "cyber attacks"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
attackrecords = "attackrecords.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["attackrecords"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
