[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nxparse"
version = "0.1.0"
description = "Typed parsers for NX-API JSON responses from Nexus switches"
requires-python = ">=3.10"
dependencies = []
keywords = ["nx-api", "nexus", "network", "parser", "json", "isis", "vpc", "ntp"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["nxparse"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
