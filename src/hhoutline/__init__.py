"""hhoutline - declaration outlines for Hack source files."""

__version__ = "0.1.0"
