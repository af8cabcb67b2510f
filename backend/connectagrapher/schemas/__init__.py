from .pricing import QuoteInputs, QuoteOut, AddonLineOut, PricingConfigUpdate
from .booking import (
    BookingCreate,
    BookingCreated,
    BookingResponse,
    BookingStatusUpdate,
    PaymentSummary,
)
from .payment import CheckoutCreate, CheckoutResponse
from .gallery import (
    GalleryAccess,
    GalleryResponse,
    GalleryAdminResponse,
    GalleryImageAdd,
    GalleryImagesReplace,
    GalleryUpdate,
)
from .catalogue import CatalogueCreate, CatalogueSafe, CatalogueAdmin
from .review import ReviewCreate, ReviewSafe, ReviewAdmin
from .contact import ContactCreate, ContactResponse, ContactStatusUpdate
from .user import UserCreate, UserResponse, PhotographerDecision, AdminEmailCreate
