[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vitakit"
version = "0.1.0"
description = "Building blocks for console homebrew build tooling: SCE ELF/SELF structures, NID hashing, YAML trees and helpers"
requires-python = ">=3.10"
dependencies = [
    "pyyaml",
]
keywords = ["elf", "self", "nid", "sha256", "yaml", "homebrew", "toolchain"]
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
    "Topic :: Software Development :: Build Tools",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["vitakit"]

[tool.pytest.ini_options]
addopts = "-ra"
