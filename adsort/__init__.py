"""Load Super Bowl ads, filter them by content and sort them by views."""

__version__ = "0.1.0"