[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "remotekit"
version = "0.1.0"
description = "Building blocks for remote-control tools: key and mouse-button models, an input DSL, platform key tables, packet framing, zstd compression and asyncio networking helpers"
requires-python = ">=3.10"
keywords = ["remote-control", "keyboard", "mouse", "dsl", "framing", "codec", "zstd", "asyncio", "secretbox"]
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
    "Framework :: AsyncIO",
    "Topic :: Software Development :: Libraries",
    "Topic :: System :: Networking",
]
dependencies = [
    "zstandard",
    "pynacl",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[tool.hatch.build.targets.wheel]
packages = ["remotekit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
