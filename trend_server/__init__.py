"""Compare public sentiment toward two topics from recent Reddit posts."""

__version__ = "0.1.0"
