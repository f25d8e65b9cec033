[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "weatherlog"
version = "0.1.0"
description = "Sort and summarise timestamped temperature readings"
requires-python = ">=3.10"
dependencies = []
keywords = ["weather", "temperature", "sorting", "daily-average", "avl-tree"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Atmospheric Science",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
weatherlog-sort = "weatherlog.readings:main"
weatherlog-daily = "weatherlog.daily:main"

[tool.hatch.build.targets.wheel]
packages = ["weatherlog"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
