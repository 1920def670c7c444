"""Product Domain Layer."""
