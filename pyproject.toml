[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cipherlab"
version = "0.1.0"
description = "Classical and modern cipher exercises: shift, affine, Vigenere, substitution, Playfair, Hill, toy DES, block modes, RSA, DSA and more"
requires-python = ">=3.10"
dependencies = [
    "pycryptodome",
]
keywords = [
    "cryptography",
    "cipher",
    "caesar",
    "affine",
    "vigenere",
    "playfair",
    "hill",
    "des",
    "rsa",
    "education",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Education",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["cipherlab"]

[tool.pytest.ini_options]
addopts = "-ra"
