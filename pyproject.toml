[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "circuitos"
version = "0.1.0"
description = "Byte buffers, LED matrix drawing, pixel fonts, I2C device drivers and piezo chirp playback for small embedded gadgets"
requires-python = ">=3.10"
keywords = ["embedded", "led-matrix", "i2c", "buffer", "ring-buffer", "piezo", "font", "aw9523", "is31fl3731"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Embedded Systems",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["circuitos"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
