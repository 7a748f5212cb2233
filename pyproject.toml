[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "floatverse"
version = "0.1.0"
description = "Model of a floating desktop panel: items, todo lists, alarms, layout helpers and style sheet highlighting"
requires-python = ">=3.10"
dependencies = []
keywords = ["desktop", "panel", "todo", "alarm", "qss", "layout"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["floatverse"]

[tool.pytest.ini_options]
addopts = "-ra"
