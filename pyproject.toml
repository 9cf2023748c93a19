[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mos6502"
version = "0.1.0"
description = "A small cycle-paced MOS 6502 CPU emulator with jump and subroutine instructions"
requires-python = ">=3.10"
dependencies = []
keywords = ["6502", "emulator", "cpu", "retro"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: System :: Emulators",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mos6502 = "mos6502.main:main"

[tool.hatch.build.targets.wheel]
packages = ["mos6502"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
