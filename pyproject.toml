[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "adsort"
version = "0.1.0"
description = "Browse Super Bowl ads filtered by content and sorted by views, using merge sort or quick sort"
requires-python = ">=3.10"
dependencies = []
keywords = ["sorting", "merge sort", "quick sort", "super bowl", "ads", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
adsort = "adsort.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["adsort"]

[tool.pytest.ini_options]
addopts = "-ra"
