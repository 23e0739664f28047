"""Version information for gammusms."""

__version__ = "0.1.0"
