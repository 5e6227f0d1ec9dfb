[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nbpkalkulator"
version = "0.1.0"
description = "Interactive currency calculator using the National Bank of Poland average exchange rates (table A)"
requires-python = ">=3.10"
dependencies = []
keywords = ["currency", "exchange rates", "NBP", "converter", "PLN"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Polish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
nbpkalkulator = "nbpkalkulator.app:main"

[tool.hatch.build.targets.wheel]
packages = ["nbpkalkulator"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
