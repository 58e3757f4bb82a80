[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tenpin"
version = "1.0.0"
description = "Ten-pin bowling scorer that plays games from roll files or a built-in sample"
requires-python = ">=3.10"
dependencies = []
keywords = ["bowling", "ten-pin", "score", "game"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
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

[project.scripts]
tenpin = "tenpin.controller:main"

[tool.hatch.build.targets.wheel]
packages = ["tenpin"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
