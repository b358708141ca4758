[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rawmem"
version = "0.1.0"
description = "Byte-level memory routines, software multiplication and deterministic integer/float fuzzing helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["memcpy", "memmove", "memset", "memcmp", "strlen", "fuzzing", "xoshiro", "multiplication"]
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
    "Topic :: Software Development :: Libraries",
    "Topic :: Software Development :: Testing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rawmem"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
