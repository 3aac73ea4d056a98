[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "osched"
version = "0.1.0"
description = "Discrete-time CPU scheduling simulator with buddy-system memory allocation"
requires-python = ">=3.10"
dependencies = []
keywords = ["scheduling", "simulation", "operating-system", "buddy-allocator", "round-robin"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Environment :: Console",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Operating System",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
osched = "osched.generator:main"

[tool.hatch.build.targets.wheel]
packages = ["osched"]

[tool.pytest.ini_options]
addopts = "-ra"
