[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rxrenamer"
version = "0.1.0"
description = "Rename your files and directories"
requires-python = ">=3.10"
keywords = ["cli", "tool", "rename", "file-renamer", "directory", "regex"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]
dependencies = [
    "unidecode",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
rxrenamer = "rxrenamer.main:main"

[tool.hatch.build.targets.wheel]
packages = ["rxrenamer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
