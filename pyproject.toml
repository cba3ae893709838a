[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "routeone"
version = "0.1.0"
description = "A small text adventure: pick a starter, battle wild monsters on Route 1 and face your rival."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "text-adventure", "terminal", "battle", "role-playing"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
routeone = "routeone.game:main"

[tool.hatch.build.targets.wheel]
packages = ["routeone"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
