"""Label and close issues opened by accounts still using the default avatar."""

__version__ = "0.1.0"
