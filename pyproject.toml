[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "membot"
version = "0.1.0"
description = "A keyword-driven chatbot that walks an answer graph loaded from a text file"
requires-python = ">=3.10"
dependencies = []
keywords = ["chatbot", "answer-graph", "levenshtein", "dialog"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Chat",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
membot = "membot.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["membot"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
