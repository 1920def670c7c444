"""Product Presentation Layer."""
