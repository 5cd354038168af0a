import datetime as dt
from decimal import Decimal

import pytest

from settlement_reporting.trade_event import TradeEvent


FULL_EVENT = TradeEvent(
    stock_name="foo",
    buy_sell_indicator="B",
    instruction_date=dt.date(2017, 11, 30),
    settlement_date=dt.date(2017, 12, 1),
    currency="SGD",
    agreed_fx=Decimal("0.50"),
    units=200,
    price_per_unit=Decimal("100.25"),
)


def test_notional_amount_is_exact():
    assert FULL_EVENT.notional_amount() == Decimal("10025.0000")


def test_missing_numeric_field_collapses_to_zero():
    for missing in ("agreed_fx", "units", "price_per_unit"):
        event = TradeEvent(**{**FULL_EVENT.__dict__, missing: None})
        assert event.notional_amount() == Decimal("0")


def test_default_event_is_all_absent():
    event = TradeEvent()
    assert event.stock_name is None
    assert event.settlement_date is None
    assert event.notional_amount() == Decimal("0")


def test_with_settlement_date_returns_copy():
    moved = FULL_EVENT.with_settlement_date(dt.date(2017, 12, 4))
    assert moved.settlement_date == dt.date(2017, 12, 4)
    assert FULL_EVENT.settlement_date == dt.date(2017, 12, 1)
    assert moved.stock_name == FULL_EVENT.stock_name


def test_equality_and_hash_are_field_based():
    copy = TradeEvent(**FULL_EVENT.__dict__)
    assert copy == FULL_EVENT
    assert hash(copy) == hash(FULL_EVENT)
    assert copy != FULL_EVENT.with_settlement_date(dt.date(2017, 12, 4))


def test_from_dict_parses_strings_and_keeps_decimal_digits():
    event = TradeEvent.from_dict(
        {
            "stock_name": "bar",
            "buy_sell_indicator": "s",
            "settlement_date": "2017-12-02",
            "currency": "AED",
            "agreed_fx": 0.22,
            "units": "450",
            "price_per_unit": "150.5",
        }
    )
    assert event.settlement_date == dt.date(2017, 12, 2)
    assert event.instruction_date is None
    assert event.agreed_fx == Decimal("0.22")
    assert event.units == 450
    assert event.price_per_unit == Decimal("150.5")


def test_to_dict_round_trips_through_from_dict():
    data = FULL_EVENT.to_dict()
    assert data["settlement_date"] == "2017-12-01"
    assert data["agreed_fx"] == "0.50"
    assert TradeEvent.from_dict(data) == FULL_EVENT


def test_from_dict_rejects_non_finite_amounts():
    for value in (float("nan"), float("inf"), "Infinity", Decimal("NaN")):
        with pytest.raises(ValueError):
            TradeEvent.from_dict({"agreed_fx": value})
