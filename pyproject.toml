[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bridgr"
version = "0.1.0"
description = "CRUD JSON endpoints and an OpenAPI document for dataclass models stored through SQLAlchemy, served over WSGI"
requires-python = ">=3.10"
dependencies = [
    "sqlalchemy",
]
keywords = ["crud", "rest", "wsgi", "openapi", "swagger", "sqlalchemy", "dataclasses"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Internet :: WWW/HTTP :: WSGI :: Application",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
bridgr-example = "bridgr.example:main"

[tool.hatch.build.targets.wheel]
packages = ["bridgr"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
