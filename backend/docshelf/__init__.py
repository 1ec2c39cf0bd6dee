"""docshelf - per-user tag management for a document library."""

__version__ = "0.1.0"
