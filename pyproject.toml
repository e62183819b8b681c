[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vaxbatch"
version = "0.1.0"
description = "Command-driven tracker for vaccine batches and the inoculations given from them"
requires-python = ">=3.10"
dependencies = []
keywords = ["vaccine", "inoculation", "batch", "stock", "command-line"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Healthcare Industry",
    "Natural Language :: English",
    "Natural Language :: Portuguese",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Medical Science Apps.",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
vaxbatch = "vaxbatch.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["vaxbatch"]

[tool.pytest.ini_options]
addopts = "-ra"
