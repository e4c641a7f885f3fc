[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "modestiot"
version = "0.1.0"
description = "A small event-driven, command-oriented framework for modelling IoT sensors, actuators and devices"
requires-python = ">=3.10"
dependencies = []
keywords = ["iot", "embedded", "events", "commands", "cqrs", "sensor", "actuator", "gpio"]
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
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["modestiot"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
