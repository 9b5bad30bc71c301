[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "summerplayer"
version = "0.1.0"
description = "A small desktop music player with list, single and random loop modes"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["music", "player", "audio", "playlist", "mp3", "ogg", "wav"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Players",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
summerplayer = "summerplayer.app:main"

[tool.hatch.build.targets.wheel]
packages = ["summerplayer"]

[tool.pytest.ini_options]
addopts = "-ra"
