[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rmwkit"
version = "0.1.0"
description = "Middleware data types: durations, QoS profiles, events, options and topic endpoint info"
requires-python = ">=3.10"
dependencies = []
keywords = ["middleware", "qos", "pubsub", "robotics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rmwkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
