[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dxfsections"
version = "0.1.0"
description = "Parse the HEADER and TABLES sections of DXF drawings from their tags into Python objects"
requires-python = ">=3.10"
dependencies = []
keywords = ["dxf", "cad", "drawing", "parser", "layers", "linetypes", "styles"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: File Formats",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dxfsections"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
