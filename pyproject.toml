[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "deconzlib"
version = "1.2.0"
description = "Small utility library: SHA-256 and HMAC, byte and string streams, arenas, ISO 8601 parsing, touchlink requests and HTTP request header parsing"
requires-python = ">=3.10"
dependencies = []
keywords = ["sha256", "hmac", "byte-stream", "string-stream", "iso8601", "http", "zigbee", "touchlink"]
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
packages = ["deconzlib"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
