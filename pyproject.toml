[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mikekit"
version = "0.1.0"
description = "Gameplay helpers: vector math, events, timers, and health, sprint, reordering and perception components"
requires-python = ">=3.10"
dependencies = []
keywords = ["gameplay", "game", "components", "math", "timers", "events"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mikekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
