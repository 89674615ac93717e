[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "blocktris"
version = "0.1.0"
description = "A small falling-blocks puzzle game with a menu, music and a local leaderboard"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "puzzle", "falling blocks", "pygame", "leaderboard"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Intended Audience :: End Users/Desktop",
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
test = [
    "pytest",
]

[project.scripts]
blocktris = "blocktris.app:main"

[tool.hatch.build.targets.wheel]
packages = ["blocktris"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
