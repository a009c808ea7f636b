[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "thinmint"
version = "0.1.0"
description = "Bitboard chess core: board state, attack generation and static evaluation terms"
requires-python = ">=3.10"
dependencies = []
keywords = ["chess", "bitboard", "attacks", "evaluation", "piece-square tables"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["thinmint"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
