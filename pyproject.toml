[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chunkfs"
version = "0.1.0"
description = "Chunk storage for a distributed file store: on-disk chunk store, TCP chunk streaming service and an interactive client shell."
requires-python = ">=3.10"
dependencies = []
keywords = ["distributed", "filesystem", "chunks", "storage", "datanode", "asyncio"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Framework :: AsyncIO",
    "Topic :: System :: Filesystems",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[project.scripts]
chunkfs-client = "chunkfs.client:main"
chunkfs-datanode = "chunkfs.datanode:main"

[tool.hatch.build.targets.wheel]
packages = ["chunkfs"]

[tool.pytest.ini_options]
addopts = "-ra"
