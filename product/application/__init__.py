"""Product Application Layer."""
