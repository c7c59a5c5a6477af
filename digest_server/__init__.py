"""Local web server exposing a token from a key=value file."""

__version__ = "1.0.0"
