[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jawarat"
version = "1.0.0"
description = "Audit HS256 JSON Web Tokens for weak signing secrets"
requires-python = ">=3.10"
dependencies = []
keywords = ["jwt", "hs256", "security", "audit", "wordlist", "bruteforce"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Information Technology",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
jawarat = "jawarat.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["jawarat"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
