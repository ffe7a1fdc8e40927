[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "keyid"
version = "0.1.0"
description = "Harmonic track suggestions and playlist generation for DJs using Camelot keys, BPM and tags"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "dj",
    "camelot",
    "harmonic-mixing",
    "rekordbox",
    "playlist",
    "bpm",
    "m3u",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["keyid"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
