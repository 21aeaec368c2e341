[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "drvr"
version = "0.1.0"
description = "Car-part infographics, a driving-theory quiz and a small fuel-system simulation"
requires-python = ">=3.10"
dependencies = []
keywords = ["education", "car", "quiz", "infographics", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education :: Computer Aided Instruction (CAI)",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
drvr-editor = "drvr.editor:main"

[tool.hatch.build.targets.wheel]
packages = ["drvr"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
