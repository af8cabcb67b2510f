from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional


class QuoteInputs(BaseModel):
    """Booking selection fields that drive the price.

    Enumerated fields stay plain strings here so the calculator can report
    every bad value at once with a field-level message.
    """

    service_type: str
    package_type: str
    parish: str
    has_photo_package: bool = True
    has_video_package: bool = False
    video_package_type: Optional[str] = None
    number_of_people: int = 1
    event_hours: Optional[int] = None
    addons: List[str] = Field(default_factory=list)


class AddonLineOut(BaseModel):
    addon: str
    price: int


class QuoteOut(BaseModel):
    service_type: str
    package_type: str
    video_package_type: Optional[str] = None
    parish_group: str
    event_hours: Optional[int] = None
    base_price: int
    video_price: int
    extra_person_fee: int
    addons: List[AddonLineOut]
    addons_total: int
    transportation_fee: int
    total_price: int
    deposit_amount: int
    balance_due: int
    currency: str

    @classmethod
    def from_quote(cls, quote) -> "QuoteOut":
        return cls(
            service_type=quote.service_type.value,
            package_type=quote.package_type.value,
            video_package_type=quote.video_package_type.value if quote.video_package_type else None,
            parish_group=quote.parish_group.value,
            event_hours=quote.event_hours,
            base_price=quote.base_price,
            video_price=quote.video_price,
            extra_person_fee=quote.extra_person_fee,
            addons=[AddonLineOut(addon=line.addon.value, price=line.price) for line in quote.addons],
            addons_total=quote.addons_total,
            transportation_fee=quote.transportation_fee,
            total_price=quote.total_price,
            deposit_amount=quote.deposit_amount,
            balance_due=quote.balance_due,
            currency=quote.currency,
        )


class PricingConfigUpdate(BaseModel):
    """Partial pricing table; merged over the defaults and validated whole."""

    packages: Optional[Dict[str, Any]] = None
    addons: Optional[Dict[str, int]] = None
    fees: Optional[Dict[str, Any]] = None
    currency: Optional[str] = None

    def overrides(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)
