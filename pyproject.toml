[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "doubledodge"
version = "0.1.0"
description = "A two-player arcade game: steer both squares and dodge the creatures crossing the arena."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "arcade", "dodge", "two-player", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
doubledodge = "doubledodge.app:main"

[tool.hatch.build.targets.wheel]
packages = ["doubledodge"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
