"""dailypage: offline-first journal store with writing analytics."""

__version__ = "0.1.0"
