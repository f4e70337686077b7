"""List the top-level declarations of Go source trees."""

__version__ = "0.1.0"
