from pydantic import BaseModel, EmailStr, Field
from typing import List, Optional, Annotated
from datetime import datetime

from ..models.gallery import GalleryImageSet, GalleryStatus


class GalleryAccess(BaseModel):
    email: EmailStr
    access_code: Annotated[str, Field(min_length=4, max_length=16)]


class GalleryResponse(BaseModel):
    """Client view of a gallery; never echoes the access code."""

    id: int
    booking_id: Optional[int] = None
    status: GalleryStatus
    gallery_images: List[str]
    selected_images: List[str]
    final_images: List[str]
    gallery_download_enabled: bool
    selected_download_enabled: bool
    final_download_enabled: bool

    model_config = {"from_attributes": True}


class GalleryAdminResponse(GalleryResponse):
    client_email: str
    access_code: str
    created_at: datetime
    updated_at: datetime


class GalleryImageAdd(BaseModel):
    image_set: GalleryImageSet = GalleryImageSet.GALLERY
    url: Annotated[str, Field(min_length=1, max_length=2048)]


class GalleryImagesReplace(BaseModel):
    image_set: GalleryImageSet
    images: List[Annotated[str, Field(min_length=1, max_length=2048)]]


class GalleryUpdate(BaseModel):
    status: Optional[GalleryStatus] = None
    gallery_download_enabled: Optional[bool] = None
    selected_download_enabled: Optional[bool] = None
    final_download_enabled: Optional[bool] = None
