[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pixelplay"
version = "1.0.0"
description = "Small pygame arcade games and drawing demos: snake, falling blocks, a mouse-aimed shooter and animated primitives."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["pygame", "arcade", "snake", "tetris", "shooter", "demo", "2d"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pixelplay-snake = "pixelplay.snake_game:main"
pixelplay-tetris = "pixelplay.tetris_game:main"
pixelplay-shooter = "pixelplay.shooter_game:main"
pixelplay-demos = "pixelplay.demos:main"

[tool.hatch.build.targets.wheel]
packages = ["pixelplay"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
ignore_missing_imports = true
