"""staffctl — employee record manager with file-backed persistence."""

__version__ = "0.1.0"
