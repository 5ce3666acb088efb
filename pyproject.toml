[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "baselib"
version = "0.1.0"
description = "Insertion-ordered hash map, growable array list and FNV-1a, MurmurHash3 and SipHash functions"
requires-python = ">=3.10"
dependencies = []
keywords = ["hashmap", "siphash", "halfsiphash", "murmur3", "fnv1a", "splitmix64", "array list", "data structures"]
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
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["baselib"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
