[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spritesheet_anim"
version = "0.1.0"
description = "Easing curves, clips, spritesheet frame selection and a named store for sprite animations"
requires-python = ">=3.10"
dependencies = []
keywords = ["spritesheet", "animation", "sprite", "easing", "texture atlas", "game development"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["spritesheet_anim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
