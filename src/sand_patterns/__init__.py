"""Sand table pattern creator."""

__version__ = "1.0.0"
