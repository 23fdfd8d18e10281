[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "retrovram"
version = "0.1.0"
description = "Convert MSX SCREEN 5 images into the video memory layouts of other retro computers"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "msx",
    "sc5",
    "screen5",
    "pc-98",
    "pc-88va",
    "x68000",
    "fm-towns",
    "vga",
    "bitplanes",
    "sprites",
    "retrocomputing",
]
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
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
    "Topic :: System :: Emulators",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
retrovram-binconv = "retrovram.binconv:main"

[tool.hatch.build.targets.wheel]
packages = ["retrovram"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
