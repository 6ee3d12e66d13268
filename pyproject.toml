[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sensorhub"
version = "0.1.0"
description = "A small HTTP API that relays sensor readings and actuator commands over TCP."
requires-python = ">=3.10"
dependencies = []
keywords = ["sensors", "actuators", "iot", "tcp", "http", "home-automation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: No Input/Output (Daemon)",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Home Automation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sensorhub = "sensorhub.server:main"
sensorhub-demo = "sensorhub.demos:main"

[tool.hatch.build.targets.wheel]
packages = ["sensorhub"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
