"""Interactive assistant for command-typo fixes and text-file format checks."""

__version__ = "1.0.0"
