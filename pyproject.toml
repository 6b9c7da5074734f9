[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vrscene"
version = "0.1.0"
description = "A small software 3D renderer: meshes from .vrobj files, perspective projection and scanline face filling in a pygame window"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["3d", "renderer", "rasterizer", "perspective", "mesh", "pygame", "scanline"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
vrscene = "vrscene.app:main"

[tool.hatch.build.targets.wheel]
packages = ["vrscene"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
