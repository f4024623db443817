[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mcskin"
version = "0.1.0"
description = "Minecraft skin geometry, UV mapping, skin type detection, walking animation and viewer state"
requires-python = ">=3.10"
keywords = ["minecraft", "skin", "3d", "model", "uv", "animation"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
dependencies = [
    "numpy",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
    "numpy",
    "pillow",
]

[tool.hatch.build.targets.wheel]
packages = ["mcskin"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
