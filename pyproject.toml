[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "wireframe"
version = "0.1.0"
description = "Isometric wireframe viewer for .fdf height maps"
requires-python = ">=3.10"
dependencies = ["pygame"]
keywords = ["wireframe", "isometric", "heightmap", "fdf", "bresenham"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: End Users/Desktop",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Multimedia :: Graphics :: Viewers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wireframe = "wireframe.app:main"

[tool.setuptools.packages.find]
include = ["wireframe*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
