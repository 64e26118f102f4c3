[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jumpball"
version = "0.1.0"
description = "A small side-scrolling arcade game: jump the rolling ball over incoming obstacles."
requires-python = ">=3.10"
dependencies = ["pygame"]
keywords = ["game", "arcade", "pygame", "jumping", "endless-runner"]
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
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
jumpball = "jumpball.app:main"

[tool.hatch.build.targets.wheel]
packages = ["jumpball"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
