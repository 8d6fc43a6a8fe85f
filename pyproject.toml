[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spotifygui"
version = "0.1.0"
description = "A small windowed Spotify playback controller using the Web API and an OpenGL panel"
requires-python = ">=3.10"
keywords = ["spotify", "music", "player", "opengl", "gui"]
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
dependencies = [
    "requests",
    "pyglet",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
spotifygui = "spotifygui.app:main"

[tool.hatch.build.targets.wheel]
packages = ["spotifygui"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
