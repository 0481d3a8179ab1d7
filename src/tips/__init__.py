"""tips — list, filter and edit small plain-text notes from the terminal."""

__version__ = "0.0.1"
