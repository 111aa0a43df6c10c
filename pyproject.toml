[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pctoolkit"
version = "0.1.0"
description = "Small utilities: bit-transition helpers, a learning finite-state machine, a cursor linked list, a byte ring buffer and a file wrapper"
requires-python = ">=3.10"
dependencies = []
keywords = ["finite-state-machine", "linked-list", "ring-buffer", "bitwise", "utilities"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pctoolkit-lili = "pctoolkit.lili_cli:main"
pctoolkit-lfsm = "pctoolkit.lfsm_cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pctoolkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
