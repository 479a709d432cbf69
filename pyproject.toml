[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sectorscope"
version = "0.1.0"
description = "Inspect raw disk images: dump sectors and browse the root directory of FAT32 volumes."
requires-python = ">=3.10"
dependencies = []
keywords = ["fat32", "disk-image", "sector", "hexdump", "filesystem"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Filesystems",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sectorscope = "sectorscope.kernel:main"

[tool.hatch.build.targets.wheel]
packages = ["sectorscope"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
