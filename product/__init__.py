"""Product comparison service."""
