[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "statusline"
version = "0.1.0"
description = "Gather system information from procfs, sysfs and the shell and show it as a single status line"
requires-python = ">=3.10"
dependencies = []
keywords = ["status", "statusbar", "monitoring", "sysfs", "procfs", "xsetroot"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
statusline = "statusline.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["statusline"]

[tool.pytest.ini_options]
addopts = "-ra"
