[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "moduleone"
version = "0.1.0"
description = "Three small console exercises: a megaphone, an eight-slot phone book and a logged bank-account ledger."
requires-python = ">=3.10"
dependencies = []
keywords = ["exercises", "phonebook", "megaphone", "accounts", "ledger", "console"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
megaphone = "moduleone.megaphone:main"
phonebook = "moduleone.phonebook_cli:main"
account-demo = "moduleone.account_demo:main"

[tool.hatch.build.targets.wheel]
packages = ["moduleone"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
