[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dramenergy"
version = "0.1.0"
description = "Energy and cycle-statistics records for DRAM power estimation"
requires-python = ">=3.10"
dependencies = []
keywords = ["dram", "power", "energy", "memory", "statistics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dramenergy"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
