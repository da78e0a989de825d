[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "unblock"
version = "0.1.0"
description = "A sliding-block puzzle game: slide the red block out of the jam."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["puzzle", "game", "sliding-blocks", "rush-hour", "unblock", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
unblock = "unblock.app:main"

[tool.hatch.build.targets.wheel]
packages = ["unblock"]

[tool.pytest.ini_options]
addopts = "-ra"
