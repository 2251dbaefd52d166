[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dhkeyxc"
version = "0.1.0"
description = "Diffie-Hellman key exchange over TCP followed by an AES-256-GCM encrypted chat"
requires-python = ">=3.10"
keywords = ["diffie-hellman", "aes-gcm", "scrypt", "key-exchange", "chat", "rfc3526"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Communications :: Chat",
]
dependencies = [
    "cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
dh-key-xc = "dhkeyxc.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dhkeyxc"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
