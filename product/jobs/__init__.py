"""Product Service Jobs."""
