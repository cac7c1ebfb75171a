[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jankbits"
version = "0.1.0"
description = "A small 2D arcade game about launching firework bits"
requires-python = ">=3.10"
keywords = ["game", "arcade", "fireworks", "pygame", "2d"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
jankbits = "jankbits.app:main"

[tool.hatch.build.targets.wheel]
packages = ["jankbits"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
