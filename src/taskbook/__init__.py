"""Console task tracker: in-memory task store with whole-file JSON persistence."""

__version__ = "1.0.0"
