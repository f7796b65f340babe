"""Version of the appversion package."""

__version__ = "0.1.0"
