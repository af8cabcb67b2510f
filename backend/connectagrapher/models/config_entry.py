from sqlalchemy import Column, JSON, String

from .base import BaseModel


class PricingConfigEntry(BaseModel):
    """Admin-edited pricing table, stored whole under a single key."""

    __tablename__ = "pricing_configs"

    key    = Column(String, primary_key=True)
    config = Column(JSON, nullable=False, default=dict)


class SiteConfigEntry(BaseModel):
    """Admin-edited branding/theme/page copy, stored whole under a single key."""

    __tablename__ = "site_configs"

    key    = Column(String, primary_key=True)
    config = Column(JSON, nullable=False, default=dict)
