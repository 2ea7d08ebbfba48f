[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ttkcommon"
version = "2.8.0"
description = "Common utilities: bounded string copies, spec-defined enums, time values, 128-bit integers, deferred dispatch, dated log files, platform detection and a service launcher"
requires-python = ">=3.10"
dependencies = []
keywords = ["utilities", "strlcpy", "enum", "time", "int128", "logging", "dispatch", "platform"]
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

[tool.hatch.build.targets.wheel]
packages = ["ttkcommon"]

[tool.pytest.ini_options]
addopts = "-ra"
