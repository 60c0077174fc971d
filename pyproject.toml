[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gfxutils"
version = "0.1.0"
description = "Small graphics toolkit: vectors, matrices, camera, colour conversion, images, height grids and OBJ meshes"
requires-python = ">=3.10"
dependencies = []
keywords = ["graphics", "vector", "matrix", "image", "color", "obj", "camera", "heightmap"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gfxutils"]

[tool.pytest.ini_options]
addopts = "-ra"
