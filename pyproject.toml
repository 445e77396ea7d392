[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zkcircuit_kit"
version = "1.0.0"
description = "R1CS file reading and writing, circuit structure helpers, field interval bounds and SMT-LIB building blocks for zero-knowledge constraint systems"
requires-python = ">=3.10"
dependencies = []
keywords = ["r1cs", "zero-knowledge", "circom", "smt", "constraints", "finite-field"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["zkcircuit_kit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
