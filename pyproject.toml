[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cckit"
version = "0.1.0"
description = "Common utilities: vector, matrix and quaternion math, filesystem helpers, logging and string tools"
requires-python = ">=3.10"
dependencies = []
keywords = ["math", "vector", "matrix", "quaternion", "filesystem", "logging", "string", "encoding"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cckit"]

[tool.pytest.ini_options]
addopts = "-ra"
