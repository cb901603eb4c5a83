class BookingError(ValueError):
    """Raised when a booking or a batch of bookings is malformed."""
