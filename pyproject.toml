[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "eagleparse"
version = "0.1.0"
description = "Read EAGLE library, board and schematic XML files into plain Python objects"
requires-python = ">=3.10"
dependencies = []
keywords = ["eagle", "eda", "pcb", "schematic", "footprint", "xml", "parser"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Manufacturing",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["eagleparse"]

[tool.pytest.ini_options]
addopts = "-ra"
