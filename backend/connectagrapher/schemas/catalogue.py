from pydantic import BaseModel, Field
from typing import List, Optional, Annotated
from datetime import datetime

from ..services.pricing_catalog import ServiceType


class CatalogueCreate(BaseModel):
    title: Annotated[str, Field(min_length=1, max_length=200)]
    description: Optional[str] = None
    service_type: ServiceType
    cover_image: Annotated[str, Field(min_length=1)]
    images: List[str] = Field(default_factory=list)
    booking_id: Optional[int] = None
    sort_order: int = 0


class CatalogueSafe(BaseModel):
    """Public catalogue fields; no booking or client linkage."""

    id: int
    title: str
    description: Optional[str] = None
    service_type: str
    cover_image: str
    images: List[str]
    published_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class CatalogueAdmin(CatalogueSafe):
    booking_id: Optional[int] = None
    is_published: bool
    sort_order: int
    created_at: datetime
    updated_at: datetime
