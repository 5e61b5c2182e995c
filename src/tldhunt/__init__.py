"""tldhunt — domain availability checker across top-level domains."""

__version__ = "0.3.0"
