[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cengine"
version = "0.1.0"
description = "A small entity-component engine core: OBJ mesh loading, 4x4 matrix maths, transforms, cameras, input state and render systems"
requires-python = ">=3.10"
dependencies = []
keywords = ["ecs", "entity-component-system", "3d", "matrix", "obj", "mesh", "camera"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
