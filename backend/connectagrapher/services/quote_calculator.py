"""Deterministic quote computation.

``calculate_quote`` is a pure function of its request and a frozen
:class:`PricingConfig`. Every input is checked against the enumerated sets
first; a single :class:`PricingValidationError` lists all offending fields and
no arithmetic happens on a rejected request.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from ..utils.errors import PricingValidationError
from .parishes import resolve_parish_group
from .pricing_catalog import (
    DEFAULT_PRICING_CONFIG,
    Addon,
    ParishGroup,
    PricingConfig,
    ServiceType,
    Tier,
)

DEPOSIT_RATE = Decimal("0.5")
_UNIT = Decimal("1")


@dataclass(frozen=True)
class QuoteRequest:
    service_type: str
    package_type: str
    parish: str
    has_photo_package: bool = True
    has_video_package: bool = False
    video_package_type: Optional[str] = None
    number_of_people: int = 1
    event_hours: Optional[int] = None
    addons: Sequence[str] = field(default_factory=tuple)


@dataclass(frozen=True)
class AddonLine:
    addon: Addon
    price: int


@dataclass(frozen=True)
class Quote:
    service_type: ServiceType
    package_type: Tier
    video_package_type: Optional[Tier]
    parish_group: ParishGroup
    event_hours: Optional[int]
    base_price: int
    video_price: int
    extra_person_fee: int
    addons: Tuple[AddonLine, ...]
    addons_total: int
    transportation_fee: int
    total_price: int
    deposit_amount: int
    balance_due: int
    currency: str

    @property
    def addon_names(self) -> List[str]:
        return [line.addon.value for line in self.addons]


def split_deposit(total: int) -> Tuple[int, int]:
    """Return ``(deposit, balance)`` with the deposit rounded half up.

    >>> split_deposit(335)
    (168, 167)
    """
    deposit = int((Decimal(total) * DEPOSIT_RATE).quantize(_UNIT, rounding=ROUND_HALF_UP))
    return deposit, total - deposit


def _coerce(enum_cls, value):
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        try:
            return enum_cls(value.strip().lower() if enum_cls is not Addon else value.strip())
        except ValueError:
            return None
    return None


def _parse_addons(values: Iterable[str], errors: Dict[str, str]) -> List[Addon]:
    parsed: List[Addon] = []
    unknown: List[str] = []
    for raw in values or ():
        addon = _coerce(Addon, raw)
        if addon is None:
            unknown.append(str(raw))
        elif addon not in parsed:
            parsed.append(addon)
    if unknown:
        errors["addons"] = f"Unknown add-on(s): {', '.join(unknown)}."
    return parsed


def _validate(request: QuoteRequest, config: PricingConfig):
    errors: Dict[str, str] = {}

    service_type = _coerce(ServiceType, request.service_type)
    if service_type is None:
        errors["service_type"] = "Service type must be one of: photoshoot, wedding, event."

    tier = _coerce(Tier, request.package_type)
    if tier is None:
        errors["package_type"] = "Package must be one of: bronze, silver, gold, platinum."

    video_tier: Optional[Tier] = None
    if request.has_video_package:
        if request.video_package_type:
            video_tier = _coerce(Tier, request.video_package_type)
            if video_tier is None:
                errors["video_package_type"] = "Video package must be one of: bronze, silver, gold, platinum."
        else:
            video_tier = tier

    if not request.has_photo_package and not request.has_video_package:
        errors["has_photo_package"] = "Select photography, videography or both."

    people = request.number_of_people
    if isinstance(people, bool) or not isinstance(people, int) or people < 1:
        errors["number_of_people"] = "Number of people must be a whole number of at least 1."

    parish_group = resolve_parish_group(request.parish)
    if parish_group is None:
        errors["parish"] = "Unknown parish."

    addons = _parse_addons(request.addons, errors)

    hours: Optional[int] = None
    if service_type is ServiceType.EVENT:
        minimum = _event_minimum_hours(request, config)
        hours = request.event_hours if request.event_hours is not None else minimum
        if isinstance(hours, bool) or not isinstance(hours, int) or hours < minimum:
            errors["event_hours"] = f"Events are booked for at least {minimum} hours."

    if errors:
        raise PricingValidationError(errors)
    return service_type, tier, video_tier, parish_group, addons, hours


def _event_minimum_hours(request: QuoteRequest, config: PricingConfig) -> int:
    rates = config.packages.event
    minimums = []
    if request.has_photo_package:
        minimums.append(rates.photography.minimum_hours)
    if request.has_video_package:
        minimums.append(rates.videography.minimum_hours)
    return max(minimums or [rates.photography.minimum_hours])


def calculate_quote(request: QuoteRequest, config: PricingConfig = DEFAULT_PRICING_CONFIG) -> Quote:
    """Price a booking selection against ``config``.

    Raises :class:`PricingValidationError` if any field is outside its
    enumerated set.
    """
    service_type, tier, video_tier, parish_group, addons, hours = _validate(request, config)

    base_price = 0
    video_price = 0
    extra_person_fee = 0
    if service_type is ServiceType.EVENT:
        rates = config.packages.event
        if request.has_photo_package:
            base_price = rates.photography.base_rate * hours
        if request.has_video_package:
            video_price = rates.videography.base_rate * hours
    else:
        table = getattr(config.packages, service_type.value)
        package = table.photography[tier]
        if request.has_photo_package:
            base_price = package.price
        if request.has_video_package:
            video_price = table.videography[video_tier]
        if package.included_people is not None:
            extra = max(0, request.number_of_people - package.included_people)
            extra_person_fee = extra * config.fees.additional_person

    addon_lines = tuple(
        AddonLine(addon=addon, price=config.addons.price_for(addon, service_type))
        for addon in addons
    )
    addons_total = sum(line.price for line in addon_lines)
    transportation_fee = config.fees.transportation.fee_for(parish_group)

    total = base_price + video_price + extra_person_fee + addons_total + transportation_fee
    deposit, balance = split_deposit(total)

    return Quote(
        service_type=service_type,
        package_type=tier,
        video_package_type=video_tier,
        parish_group=parish_group,
        event_hours=hours,
        base_price=base_price,
        video_price=video_price,
        extra_person_fee=extra_person_fee,
        addons=addon_lines,
        addons_total=addons_total,
        transportation_fee=transportation_fee,
        total_price=total,
        deposit_amount=deposit,
        balance_due=balance,
        currency=config.currency,
    )
