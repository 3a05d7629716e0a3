[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "brawldefender"
version = "0.1.0"
description = "A small real-time tower defense game: place towers along a winding path and stop the waves of mobs."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "tower-defense", "pygame", "strategy"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Real Time Strategy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
brawldefender = "brawldefender.app:main"

[tool.hatch.build.targets.wheel]
packages = ["brawldefender"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
