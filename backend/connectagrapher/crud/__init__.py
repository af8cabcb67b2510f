from .crud_booking import booking
from .crud_gallery import gallery
from .crud_catalogue import catalogue
from .crud_review import review
from .crud_user import user
from . import crud_contact
from . import crud_config
