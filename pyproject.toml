[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lyrasynth"
version = "0.1.0"
description = "A small MIDI-driven sine-wave synthesizer with an attack/release envelope, a block-based host and 16-bit PCM output."
requires-python = ">=3.10"
dependencies = []
keywords = ["synthesizer", "midi", "audio", "sine", "envelope", "pcm", "wav"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Sound Synthesis",
    "Topic :: Multimedia :: Sound/Audio :: MIDI",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
lyrasynth = "lyrasynth.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["lyrasynth"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
