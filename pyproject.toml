[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gltfkit"
version = "0.1.0"
description = "Read-only views over decoded glTF 2.0 JSON documents: meshes, scenes, skins, textures and transform math."
requires-python = ">=3.10"
dependencies = []
keywords = ["gltf", "3d", "mesh", "scene", "skin", "texture", "quaternion", "matrix"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gltfkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
