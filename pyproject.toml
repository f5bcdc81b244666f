[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hexbench"
version = "0.1.0"
description = "Small command-line tools: greeter, word frequency counter, hex file editor and hex grid pathfinder"
requires-python = ">=3.10"
dependencies = []
keywords = ["hex", "hexdump", "word-frequency", "dijkstra", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hello = "hexbench.hello:main"
wordfreq = "hexbench.wordfreq:main"
hextool = "hexbench.hextool:main"
hexpath = "hexbench.hexpath:main"

[tool.hatch.build.targets.wheel]
packages = ["hexbench"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
