"""yarnenv — environment-dependent configuration for the yarn CLI."""

__version__ = "0.1.0"
