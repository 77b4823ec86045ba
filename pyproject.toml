[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "tudien"
version = "0.1.0"
description = "English-Vietnamese dictionary with prefix completion, suggestions and search history"
requires-python = ">=3.10"
dependencies = []
keywords = ["dictionary", "vietnamese", "english", "red-black tree", "completion"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Vietnamese",
    "Natural Language :: English",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Linguistic",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tudien = "tudien.cli:main"

[tool.setuptools.packages.find]
include = ["tudien*"]

[tool.pytest.ini_options]
addopts = "-ra"
