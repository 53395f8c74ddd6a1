[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "flapcli"
version = "0.1.0"
description = "A Flappy Bird style arcade game with a small command shell for registering players and tracking their scores"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "arcade", "flappy", "pygame", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
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
flapcli = "flapcli.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["flapcli"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
