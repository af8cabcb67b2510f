import enum

class BookingStatus(str, enum.Enum):
    """Lifecycle of a booking; payments are only accepted once CONFIRMED."""
    PENDING = "pending"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"
