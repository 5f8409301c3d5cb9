[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bignumkit"
version = "0.1.0"
description = "Arbitrary-precision integer utilities for cryptography: modular arithmetic, primality, sampling and encodings"
requires-python = ">=3.10"
dependencies = []
keywords = ["bigint", "cryptography", "modular-arithmetic", "primes", "miller-rabin", "lucas", "jacobi"]
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
    "Topic :: Security :: Cryptography",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["bignumkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
