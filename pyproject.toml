[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sutcourses"
version = "0.1.0"
description = "HTTP API that searches the university course registrar and returns grouped course, section and exam data as JSON"
requires-python = ">=3.10"
keywords = ["courses", "registrar", "scraper", "api", "timetable"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Web Environment",
    "Framework :: AsyncIO",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Natural Language :: English",
    "Natural Language :: Thai",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Indexing/Search",
]
dependencies = [
    "beautifulsoup4[html5lib]>=4.12",
    "httpx>=0.25",
    "starlette>=0.32",
    "uvicorn>=0.24",
    "python-dotenv>=1.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.4",
    "pytest-asyncio>=0.23",
]

[project.scripts]
sutcourses = "sutcourses.main:main"

[tool.hatch.build.targets.wheel]
packages = ["sutcourses"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
ignore_missing_imports = true
