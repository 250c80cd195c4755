"""Interactive command-line task list backed by a single plain-text file."""

__version__ = "0.1.0"
