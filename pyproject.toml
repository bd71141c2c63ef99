[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aceescape"
version = "0.1.0"
description = "A small 2D arcade game: steer your ship and escape the pursuing Deimos."
requires-python = ">=3.10"
dependencies = ["pygame"]
keywords = ["game", "arcade", "pygame", "2d", "space", "breakout"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
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
test = ["pytest"]

[project.scripts]
ace-escape = "aceescape.app:main"
ace-escape-breakout = "aceescape.breakout:main"
ace-escape-settings-demo = "aceescape.settings_demo_app:main"

[tool.hatch.build.targets.wheel]
packages = ["aceescape"]

[tool.pytest.ini_options]
addopts = "-ra"
