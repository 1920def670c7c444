"""Product Infrastructure Layer."""
