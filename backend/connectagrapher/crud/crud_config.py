import logging
from typing import Any, Dict, Mapping

from pydantic import ValidationError
from sqlalchemy.orm import Session

from .. import models
from ..services.pricing_catalog import DEFAULT_PRICING_CONFIG, PricingConfig, build_pricing_config
from ..services.site_config import merge_site_config

logger = logging.getLogger(__name__)

DEFAULT_KEY = "default"


def _get_entry(db: Session, model, key: str):
    return db.query(model).filter(model.key == key).first()


def _save_entry(db: Session, model, key: str, config: Mapping[str, Any]):
    entry = _get_entry(db, model, key)
    if entry is None:
        entry = model(key=key, config=dict(config))
        db.add(entry)
    else:
        entry.config = dict(config)
    db.commit()
    db.refresh(entry)
    return entry


def get_pricing_config(db: Session, key: str = DEFAULT_KEY) -> PricingConfig:
    """Return the active pricing table, falling back to defaults."""
    entry = _get_entry(db, models.PricingConfigEntry, key)
    if entry is None or not entry.config:
        return DEFAULT_PRICING_CONFIG
    try:
        return build_pricing_config(entry.config)
    except ValidationError as exc:
        logger.error("Stored pricing config %r is invalid; using defaults: %s", key, exc)
        return DEFAULT_PRICING_CONFIG


def save_pricing_config(db: Session, overrides: Mapping[str, Any], key: str = DEFAULT_KEY) -> PricingConfig:
    """Validate and store ``overrides`` as the whole stored pricing row.

    Raises ``pydantic.ValidationError`` before writing when the merged table
    is invalid.
    """
    config = build_pricing_config(overrides)
    _save_entry(db, models.PricingConfigEntry, key, overrides)
    logger.info("Pricing config %r replaced", key)
    return config


def get_site_config(db: Session, key: str = DEFAULT_KEY) -> Dict[str, Any]:
    """Return the stored site config merged over defaults, or the defaults if invalid."""
    entry = _get_entry(db, models.SiteConfigEntry, key)
    try:
        return merge_site_config(entry.config if entry else None)
    except ValidationError as exc:
        logger.error("Stored site config %r is invalid; using defaults: %s", key, exc)
        return merge_site_config(None)


def save_site_config(db: Session, config: Mapping[str, Any], key: str = DEFAULT_KEY) -> Dict[str, Any]:
    """Validate and store ``config``; raises ``pydantic.ValidationError`` before writing."""
    merged = merge_site_config(config)
    _save_entry(db, models.SiteConfigEntry, key, config)
    logger.info("Site config %r replaced", key)
    return merged
