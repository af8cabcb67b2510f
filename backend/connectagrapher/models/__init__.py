from .user import User, UserRole, PhotographerStatus
from .booking_status import BookingStatus
from .booking import Booking
from .gallery import Gallery, GalleryStatus, GalleryImageSet
from .catalogue import Catalogue
from .review import Review, ReviewType
from .contact_message import ContactMessage, ContactStatus
from .config_entry import PricingConfigEntry, SiteConfigEntry

__all__ = [
    "User",
    "UserRole",
    "PhotographerStatus",
    "BookingStatus",
    "Booking",
    "Gallery",
    "GalleryStatus",
    "GalleryImageSet",
    "Catalogue",
    "Review",
    "ReviewType",
    "ContactMessage",
    "ContactStatus",
    "PricingConfigEntry",
    "SiteConfigEntry",
]
