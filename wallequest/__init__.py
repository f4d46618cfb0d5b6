"""A side-scrolling platformer about delivering the last plant on Earth."""

__version__ = "1.0.0"