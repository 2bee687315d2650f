[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "planetviewer"
version = "0.1.0"
description = "Fly a free camera over terrain built from a grayscale heightmap image"
requires-python = ">=3.10"
keywords = ["terrain", "heightmap", "opengl", "viewer", "camera", "pyglet"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Environment :: GPU",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Viewers",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]
dependencies = [
    "numpy",
    "pillow",
    "pyglet",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
planetviewer = "planetviewer.app:main"

[tool.hatch.build.targets.wheel]
packages = ["planetviewer"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
