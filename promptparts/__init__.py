"""Building blocks for shell prompts: paths, toolchain versions, git state and more."""

__version__ = "0.1.0"