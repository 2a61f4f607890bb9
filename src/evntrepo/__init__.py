"""Event data repository checker: validates event JSON files and publishes an index."""

__version__ = "0.1.0"
