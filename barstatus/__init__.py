"""Status-line generator: system reading components, formatting and an update loop."""

__version__ = "1.0.0"