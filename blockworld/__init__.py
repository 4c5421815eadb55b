"""In-memory chunk storage, flat terrain generation and a script event host."""

__version__ = "0.0.1"