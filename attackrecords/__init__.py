"""Build, list and search binary files of cyber-attack records read from CSV."""

__version__ = "0.1.0"