[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stakeledger"
version = "0.1.0"
description = "Stake account rules in pure Python: authorities, lockups, delegation activation, splitting and merging"
requires-python = ">=3.10"
dependencies = []
keywords = ["stake", "delegation", "lockup", "validator", "merge", "warmup", "cooldown"]
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
    "Topic :: Office/Business :: Financial",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["stakeledger"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
