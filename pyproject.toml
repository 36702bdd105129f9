[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "widgetlab"
version = "0.1.0"
description = "The state and geometry behind a small set of interactive widgets: an egg timer, a teleprompter, a pivot table, a button grid and an eclipse sketch."
requires-python = ">=3.10"
dependencies = []
keywords = ["widgets", "user-interface", "egg-timer", "teleprompter", "pivot-table", "layout"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
widgetlab = "widgetlab.app:main"

[tool.hatch.build.targets.wheel]
packages = ["widgetlab"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
