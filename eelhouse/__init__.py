"""Online ordering and sales reporting service for a single-location eatery."""

__version__ = "0.1.0"
