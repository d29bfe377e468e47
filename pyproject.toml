[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "voleprf"
version = "0.1.0"
description = "Pure-Python building blocks for VOLE-based OPRF and ZK protocols: Keccak-p[1600], Mersenne-61 and 384-bit field arithmetic, carry-less 128-bit multiplication and ZK-RAM row packing"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "cryptography",
    "keccak",
    "oprf",
    "vole",
    "finite-field",
    "mersenne-prime",
    "carry-less-multiplication",
    "zero-knowledge",
]
classifiers = [
    "Development Status :: 3 - Alpha",
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
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["voleprf"]

[tool.hatch.build.targets.sdist]
include = [
    "voleprf",
    "tests",
]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
