"""Speedy - fast, cancellable search for a single file or folder."""

__version__ = "0.1.0"
