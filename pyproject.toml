[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "sphereraster"
version = "0.1.0"
description = "Pure-Python software rasterizer that renders a lit, tessellated sphere with flat, Gouraud or Phong shading to PPM and BMP"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "rasterization",
    "shading",
    "phong",
    "gouraud",
    "flat-shading",
    "software-rendering",
    "ppm",
    "bmp",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sphereraster = "sphereraster.cli:main"

[tool.setuptools.packages.find]
include = ["sphereraster*"]

[tool.pytest.ini_options]
addopts = "-ra"
