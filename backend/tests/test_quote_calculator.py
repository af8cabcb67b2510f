from decimal import ROUND_HALF_UP, Decimal

import pytest

from connectagrapher.services.parishes import resolve_parish_group
from connectagrapher.services.pricing_catalog import Addon, ParishGroup, ServiceType, Tier, build_pricing_config
from connectagrapher.services.quote_calculator import QuoteRequest, calculate_quote, split_deposit
from connectagrapher.utils.errors import PricingValidationError


def make_request(**overrides):
    fields = dict(service_type="photoshoot", package_type="gold", parish="Manchester")
    fields.update(overrides)
    return QuoteRequest(**fields)


def test_gold_photoshoot_in_manchester():
    quote = calculate_quote(make_request())
    assert quote.base_price == 300
    assert quote.transportation_fee == 35
    assert quote.total_price == 335
    assert quote.deposit_amount == 168
    assert quote.balance_due == 167
    assert quote.parish_group is ParishGroup.NEAR
    assert quote.currency == "USD"


@pytest.mark.parametrize("total,deposit,balance", [(151, 76, 75), (335, 168, 167), (300, 150, 150), (1, 1, 0), (0, 0, 0)])
def test_split_deposit_rounds_half_up(total, deposit, balance):
    assert split_deposit(total) == (deposit, balance)
    assert sum(split_deposit(total)) == total


def test_unknown_tier_is_rejected_before_pricing():
    with pytest.raises(PricingValidationError) as exc:
        calculate_quote(make_request(package_type="diamond"))
    assert "package_type" in exc.value.field_errors


def test_all_invalid_fields_reported_together():
    with pytest.raises(PricingValidationError) as exc:
        calculate_quote(
            make_request(service_type="cruise", parish="Atlantis", addons=("fireworks",), number_of_people=0)
        )
    assert set(exc.value.field_errors) == {"service_type", "parish", "addons", "number_of_people"}
    assert "fireworks" in exc.value.field_errors["addons"]


def test_addon_increases_total_by_its_price():
    without = calculate_quote(make_request())
    with_reel = calculate_quote(make_request(addons=("highlight_reel",)))
    assert with_reel.total_price - without.total_price == 250
    assert with_reel.addons_total == 250
    assert with_reel.deposit_amount + with_reel.balance_due == with_reel.total_price


def test_addons_accept_camel_case_and_count_once():
    quote = calculate_quote(make_request(addons=("clearKayak", "clear_kayak", "flyingDress")))
    assert [line.addon for line in quote.addons] == [Addon.CLEAR_KAYAK, Addon.FLYING_DRESS]
    assert quote.addons_total == 220


def test_drone_is_priced_by_service_type():
    shoot = calculate_quote(make_request(addons=("drone",)))
    wedding = calculate_quote(make_request(service_type="wedding", addons=("drone",)))
    assert shoot.addons_total == 150
    assert wedding.addons_total == 250


def test_extra_people_on_photoshoot():
    one = calculate_quote(make_request())
    three = calculate_quote(make_request(number_of_people=3))
    assert three.extra_person_fee == 100
    assert three.total_price - one.total_price == 100


def test_weddings_have_no_per_person_fee():
    quote = calculate_quote(make_request(service_type="wedding", number_of_people=40))
    assert quote.extra_person_fee == 0
    assert quote.base_price == 1250


def test_video_tier_defaults_to_photo_tier():
    quote = calculate_quote(make_request(package_type="silver", has_video_package=True, parish="Negril"))
    assert quote.base_price == 200
    assert quote.video_price == 350
    assert quote.video_package_type.value == "silver"
    assert quote.total_price == 200 + 350 + 50


def test_video_only_booking():
    quote = calculate_quote(
        make_request(
            service_type="wedding",
            package_type="bronze",
            has_photo_package=False,
            has_video_package=True,
            video_package_type="platinum",
        )
    )
    assert quote.base_price == 0
    assert quote.video_price == 1800


def test_nothing_selected_is_rejected():
    with pytest.raises(PricingValidationError) as exc:
        calculate_quote(make_request(has_photo_package=False, has_video_package=False))
    assert "has_photo_package" in exc.value.field_errors


def test_events_are_hourly():
    quote = calculate_quote(
        make_request(service_type="event", package_type="bronze", has_video_package=True, event_hours=3, parish="Kingston")
    )
    assert quote.base_price == 450
    assert quote.video_price == 300
    assert quote.total_price == 815
    assert (quote.deposit_amount, quote.balance_due) == (408, 407)


def test_event_hours_default_to_minimum_and_cannot_go_below():
    quote = calculate_quote(make_request(service_type="event", package_type="bronze"))
    assert quote.event_hours == 2
    assert quote.base_price == 300
    with pytest.raises(PricingValidationError) as exc:
        calculate_quote(make_request(service_type="event", package_type="bronze", event_hours=1))
    assert "event_hours" in exc.value.field_errors


def test_custom_pricing_config_is_used():
    config = build_pricing_config({"fees": {"additional_person": 75}})
    quote = calculate_quote(make_request(number_of_people=2), config)
    assert quote.extra_person_fee == 75


@pytest.mark.parametrize(
    "value,group",
    [
        ("Saint Elizabeth", ParishGroup.NEAR),
        ("st. elizabeth", ParishGroup.NEAR),
        ("manchester-stelizabeth", ParishGroup.NEAR),
        ("Montego Bay", ParishGroup.RESORT_CORRIDOR),
        ("St. Ann", ParishGroup.RESORT_CORRIDOR),
        ("St. Andrew", ParishGroup.OTHER),
        ("other-parishes", ParishGroup.OTHER),
        ("Atlantis", None),
        ("", None),
    ],
)
def test_resolve_parish_group(value, group):
    assert resolve_parish_group(value) is group


@pytest.mark.parametrize("service_type", [s.value for s in ServiceType])
@pytest.mark.parametrize("tier", [t.value for t in Tier])
@pytest.mark.parametrize("photo,video", [(True, False), (False, True), (True, True)])
def test_deposit_and_balance_cover_total_for_every_package(service_type, tier, photo, video):
    quote = calculate_quote(
        make_request(service_type=service_type, package_type=tier, has_photo_package=photo, has_video_package=video)
    )
    expected_deposit = int((Decimal(quote.total_price) / 2).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    assert quote.total_price > 0
    assert quote.deposit_amount == expected_deposit
    assert quote.deposit_amount + quote.balance_due == quote.total_price
