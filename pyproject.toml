[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "icmpprobe"
version = "0.1.0"
description = "A small ICMP echo (ping) client using raw sockets"
requires-python = ">=3.10"
keywords = ["ping", "icmp", "echo", "network", "raw-socket", "monitoring"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking :: Monitoring",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
icmpprobe = "icmpprobe.session:main"

[tool.hatch.build.targets.wheel]
packages = ["icmpprobe"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
