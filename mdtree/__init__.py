"""Static site generation from a tree of README.md files."""

__version__ = "0.1.0"

__all__ = ["__version__"]
