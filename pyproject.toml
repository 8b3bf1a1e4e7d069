[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "cacapalavras"
version = "1.0.0"
description = "Terminal word-search puzzle game with an editable word dictionary"
requires-python = ">=3.10"
dependencies = []
keywords = ["word search", "caca-palavras", "puzzle", "game", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cacapalavras = "cacapalavras.cli:main"

[tool.setuptools]
packages = ["cacapalavras"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
