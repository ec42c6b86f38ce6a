[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "osdemos"
version = "0.1.0"
description = "Operating-systems teaching demos: a CPU scheduling simulator and a threaded TCP chat server and client"
requires-python = ">=3.10"
dependencies = []
keywords = ["scheduling", "fcfs", "sjf", "round-robin", "chat", "sockets", "education"]
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
osdemos-schedule = "osdemos.scheduling:main"
osdemos-server = "osdemos.chat_server:main"
osdemos-client = "osdemos.chat_client:main"

[tool.setuptools.packages.find]
include = ["osdemos*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
