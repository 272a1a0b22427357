[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spacedefender"
version = "0.1.0"
description = "A small vertical-scrolling arcade shooter: dodge meteors, shoot them down, grab ammo bonuses."
requires-python = ">=3.10"
keywords = ["game", "arcade", "shooter", "pygame", "space"]
classifiers = [
    "Development Status :: 4 - Beta",
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
dependencies = ["pygame"]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
spacedefender = "spacedefender.app:main"

[tool.hatch.build.targets.wheel]
packages = ["spacedefender"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
