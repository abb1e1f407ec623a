[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "perflabs"
version = "0.1.0"
description = "Reference implementations of small performance-tuning workloads: selection, histograms, checksums, alignment, blurring, CRC-32 and an ambient-occlusion renderer."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "benchmark",
    "performance",
    "workloads",
    "crc32",
    "gaussian-blur",
    "ambient-occlusion",
    "sequence-alignment",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
perflabs-blur = "perflabs.grayscale:main"
perflabs-ao = "perflabs.ao.render:main"

[tool.hatch.build.targets.wheel]
packages = ["perflabs"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
