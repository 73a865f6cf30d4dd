from decimal import Decimal
from catalog.expansion import expand, listing_title, price_for_index
from catalog.registry import load_registry
from catalog.models import RemoteFileHandle
from conftest import make_template


def _handle():
    return RemoteFileHandle(remote_file_id=5, preview_url="https://cdn.test/5.png")


def test_tier_prices_follow_position():
    t = make_template()
    handle_prices = [v.retail_price for v in expand(t, _handle())]
    assert handle_prices == ["26.95", "26.95", "26.95", "26.95", "29.95", "32.95", "32.95"]


def test_variant_count_and_order_follow_template():
    t = make_template(groups=[
        ("Black", "#000000", [30, 31, 32]),
        ("White", "#ffffff", [10, 11]),
    ])
    variants = expand(t, _handle())
    assert len(variants) == t.variant_count == 5
    assert [v.remote_variant_id for v in variants] == [30, 31, 32, 10, 11]


def test_every_variant_carries_the_same_file():
    h = _handle()
    variants = expand(make_template(), h)
    assert all(v.attached_file == h for v in variants)


def test_tier3_applies_without_tier2():
    t = make_template(tier2=None, tier3="40")
    prices = [price_for_index(t, i) for i in range(7)]
    assert prices[:5] == [Decimal("26.95")] * 5
    assert prices[5:] == [Decimal("40")] * 2
    assert expand(t, _handle())[5].retail_price == "40.00"


def test_tier2_only_covers_all_large_sizes():
    t = make_template(tier3=None)
    assert [v.retail_price for v in expand(t, _handle())][3:] == ["26.95", "29.95", "29.95", "29.95"]


def test_no_tiers_means_flat_price():
    t = make_template(base="24.95", tier2=None, tier3=None)
    assert {v.retail_price for v in expand(t, _handle())} == {"24.95"}


def test_expand_is_idempotent():
    t = load_registry().lookup("hoodie")
    h = _handle()
    assert expand(t, h) == expand(t, h)


def test_builtin_hoodie_prices():
    hoodie = load_registry().lookup("hoodie")
    variants = expand(hoodie, _handle())
    assert len(variants) == 72
    assert [v.retail_price for v in variants[:6]] == ["36.75"] * 4 + ["38.75"] * 2


def test_listing_title():
    assert listing_title("Summer Vibes", make_template()) == "Summer Vibes — Test Tee"
