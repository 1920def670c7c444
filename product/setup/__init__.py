"""Product Service Setup."""
