"""Static pricing table for photo/video packages, add-ons and travel.

Prices are whole currency units. The table is validated once when loaded and
frozen afterwards, so a quote computed during a request always sees a single
consistent snapshot even if an admin replaces the stored table concurrently.
"""

from __future__ import annotations

import enum
import re
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..utils.json_utils import deep_merge


class ServiceType(str, enum.Enum):
    PHOTOSHOOT = "photoshoot"
    WEDDING = "wedding"
    EVENT = "event"


class Tier(str, enum.Enum):
    BRONZE = "bronze"
    SILVER = "silver"
    GOLD = "gold"
    PLATINUM = "platinum"


class MediaType(str, enum.Enum):
    PHOTO = "photo"
    VIDEO = "video"


class ParishGroup(str, enum.Enum):
    """Transportation-fee bands; values match the booking form's slugs."""
    NEAR = "manchester-stelizabeth"
    RESORT_CORRIDOR = "montegobay-negril-ochorios"
    OTHER = "other-parishes"


_CAMEL_RE = re.compile(r"(?<!^)(?=[A-Z])")


class Addon(str, enum.Enum):
    HIGHLIGHT_REEL = "highlight_reel"
    EXPRESS_DELIVERY = "express_delivery"
    DRONE = "drone"
    STUDIO_RENTAL = "studio_rental"
    FLYING_DRESS = "flying_dress"
    CLEAR_KAYAK = "clear_kayak"

    @classmethod
    def _missing_(cls, value: object):
        """Accept camelCase and dashed spellings (``highlightReel``, ``clear-kayak``)."""
        if isinstance(value, str):
            key = _CAMEL_RE.sub("_", value.strip()).replace("-", "_").lower()
            for member in cls:
                if member.value == key:
                    return member
        return None


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class PhotoPackage(_Frozen):
    price: int = Field(ge=0)
    duration: Optional[int] = Field(default=None, ge=0, description="Minutes of coverage")
    images: Optional[int] = Field(default=None, ge=0)
    locations: Optional[int] = Field(default=None, ge=0)
    # None means the package has no per-head pricing
    included_people: Optional[int] = Field(default=None, ge=1)


class TieredServicePricing(_Frozen):
    photography: Dict[Tier, PhotoPackage]
    videography: Dict[Tier, int]

    @model_validator(mode="after")
    def _all_tiers_priced(self) -> "TieredServicePricing":
        for table_name in ("photography", "videography"):
            table = getattr(self, table_name)
            missing = [t.value for t in Tier if t not in table]
            if missing:
                raise ValueError(f"{table_name} is missing tiers: {', '.join(missing)}")
        for tier, price in self.videography.items():
            if price < 0:
                raise ValueError(f"videography price for {tier.value} must be non-negative")
        return self


class HourlyRate(_Frozen):
    base_rate: int = Field(ge=0)
    minimum_hours: int = Field(ge=1)


class EventPricing(_Frozen):
    photography: HourlyRate
    videography: HourlyRate


class Packages(_Frozen):
    photoshoot: TieredServicePricing
    wedding: TieredServicePricing
    event: EventPricing


class AddonPrices(_Frozen):
    highlight_reel: int = Field(ge=0)
    express_delivery: int = Field(ge=0)
    drone_photoshoot: int = Field(ge=0)
    drone_wedding: int = Field(ge=0)
    studio_rental: int = Field(ge=0)
    flying_dress: int = Field(ge=0)
    clear_kayak: int = Field(ge=0)

    def price_for(self, addon: Addon, service_type: ServiceType) -> int:
        if addon is Addon.DRONE:
            if service_type is ServiceType.WEDDING:
                return self.drone_wedding
            return self.drone_photoshoot
        return getattr(self, addon.value)


class TransportationFees(_Frozen):
    near: int = Field(ge=0)
    resort_corridor: int = Field(ge=0)
    other: int = Field(ge=0)

    def fee_for(self, group: ParishGroup) -> int:
        return {
            ParishGroup.NEAR: self.near,
            ParishGroup.RESORT_CORRIDOR: self.resort_corridor,
            ParishGroup.OTHER: self.other,
        }[group]


class Fees(_Frozen):
    additional_person: int = Field(ge=0)
    transportation: TransportationFees


class PricingConfig(_Frozen):
    packages: Packages
    addons: AddonPrices
    fees: Fees
    currency: str = Field(default="USD", min_length=3, max_length=3)


DEFAULT_PRICING: Dict[str, Any] = {
    "packages": {
        "photoshoot": {
            "photography": {
                "bronze": {"price": 150, "duration": 45, "images": 6, "locations": 1, "included_people": 1},
                "silver": {"price": 200, "duration": 60, "images": 10, "locations": 1, "included_people": 1},
                "gold": {"price": 300, "duration": 120, "images": 15, "locations": 1, "included_people": 1},
                "platinum": {"price": 500, "duration": 150, "images": 25, "locations": 2, "included_people": 1},
            },
            "videography": {"bronze": 250, "silver": 350, "gold": 500, "platinum": 750},
        },
        "wedding": {
            "photography": {
                "bronze": {"price": 500},
                "silver": {"price": 800},
                "gold": {"price": 1250},
                "platinum": {"price": 2500},
            },
            "videography": {"bronze": 600, "silver": 800, "gold": 1250, "platinum": 1800},
        },
        "event": {
            "photography": {"base_rate": 150, "minimum_hours": 2},
            "videography": {"base_rate": 100, "minimum_hours": 2},
        },
    },
    "addons": {
        "highlight_reel": 250,
        "express_delivery": 120,
        "drone_photoshoot": 150,
        "drone_wedding": 250,
        "studio_rental": 80,
        "flying_dress": 120,
        "clear_kayak": 100,
    },
    "fees": {
        "additional_person": 50,
        "transportation": {"near": 35, "resort_corridor": 50, "other": 65},
    },
    "currency": "USD",
}


def build_pricing_config(overrides: Optional[Mapping[str, Any]] = None) -> PricingConfig:
    """Return a validated config: the defaults with ``overrides`` merged on top.

    Raises ``pydantic.ValidationError`` when the merged table is malformed.
    """
    raw = deep_merge(DEFAULT_PRICING, overrides or {})
    return PricingConfig.model_validate(raw)


DEFAULT_PRICING_CONFIG = build_pricing_config()
