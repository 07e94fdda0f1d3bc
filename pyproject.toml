[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "numlit"
version = "0.1.0"
description = "Parse and validate C-style numeric literals: decimal, hex, octal and binary integers and floats"
requires-python = ">=3.10"
dependencies = []
keywords = ["literal", "parser", "number", "hex", "float", "validator"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["numlit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
