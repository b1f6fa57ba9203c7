"""conceptlint: keep Ruby constant names in step with their file paths."""

__version__ = "0.3.0"
