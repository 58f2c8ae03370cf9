[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "honkpet"
version = "0.1.0"
description = "A pocket goose pet: sprites, save data, chatter and frame-stepped mini-games on a tiny monochrome canvas"
requires-python = ">=3.10"
dependencies = []
keywords = ["virtual pet", "goose", "pong", "flappy bird", "particles", "shooter", "monochrome", "sprites"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["honkpet"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
