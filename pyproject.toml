[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "svgslim"
version = "1.2.0"
description = "Text-level SVG minifier library and command-line tool with an svgo-style JSON configuration"
requires-python = ">=3.10"
dependencies = []
keywords = ["svg", "optimization", "minify", "cli", "graphics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[project.scripts]
svgslim = "svgslim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["svgslim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
