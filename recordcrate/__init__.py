"""Record collection manager: fixture-backed API and reactive client session."""

__version__ = "0.1.0"
