[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "labciphers"
version = "0.1.0"
description = "Classic ciphers, CRC error detection, a toy RSA and a leaky-bucket traffic shaper, as a library and small command-line tools"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "caesar",
    "vigenere",
    "playfair",
    "rsa",
    "crc",
    "leaky-bucket",
    "cryptography",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Security :: Cryptography",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
labciphers-crc = "labciphers.crc:main"
labciphers-caesar = "labciphers.caesar:main"
labciphers-leaky-bucket = "labciphers.leaky_bucket:main"
labciphers-playfair = "labciphers.playfair:main"
labciphers-vigenere = "labciphers.vigenere:main"
labciphers-rsa = "labciphers.rsa:main"

[tool.hatch.build.targets.wheel]
packages = ["labciphers"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
