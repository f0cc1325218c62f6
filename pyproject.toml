[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sarifkit"
version = "0.1.0"
description = "Build, read and write SARIF 2.1.0 static analysis reports"
requires-python = ">=3.10"
dependencies = []
keywords = ["sarif", "static-analysis", "security", "report", "json", "tfsec"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Software Development :: Quality Assurance",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sarifkit-tfsec = "sarifkit.tfsec:main"

[tool.hatch.build.targets.wheel]
packages = ["sarifkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
