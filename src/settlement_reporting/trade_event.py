"""Trade event record used by the settlement reports."""
from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Any, Dict, Optional

ZERO = Decimal("0")


@dataclass(frozen=True)
class TradeEvent:
    """A single trade instruction. Every field may be absent (None)."""

    stock_name: Optional[str] = None
    buy_sell_indicator: Optional[str] = None  # "B" | "S", any case
    instruction_date: Optional[dt.date] = None
    settlement_date: Optional[dt.date] = None
    currency: Optional[str] = None
    agreed_fx: Optional[Decimal] = None
    units: Optional[int] = None
    price_per_unit: Optional[Decimal] = None

    def notional_amount(self) -> Decimal:
        """agreed_fx * units * price_per_unit, missing factors count as zero."""
        fx = self.agreed_fx if self.agreed_fx is not None else ZERO
        units = Decimal(self.units) if self.units is not None else ZERO
        price = self.price_per_unit if self.price_per_unit is not None else ZERO
        return fx * units * price

    def with_settlement_date(self, settlement_date: dt.date) -> "TradeEvent":
        return replace(self, settlement_date=settlement_date)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TradeEvent":
        return cls(
            stock_name=data.get("stock_name"),
            buy_sell_indicator=data.get("buy_sell_indicator"),
            instruction_date=_to_date(data.get("instruction_date")),
            settlement_date=_to_date(data.get("settlement_date")),
            currency=data.get("currency"),
            agreed_fx=_to_decimal(data.get("agreed_fx")),
            units=int(data["units"]) if data.get("units") is not None else None,
            price_per_unit=_to_decimal(data.get("price_per_unit")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "stock_name": self.stock_name,
            "buy_sell_indicator": self.buy_sell_indicator,
            "instruction_date": _iso(self.instruction_date),
            "settlement_date": _iso(self.settlement_date),
            "currency": self.currency,
            "agreed_fx": str(self.agreed_fx) if self.agreed_fx is not None else None,
            "units": self.units,
            "price_per_unit": str(self.price_per_unit) if self.price_per_unit is not None else None,
        }


def _to_date(value: Any) -> Optional[dt.date]:
    if value is None:
        return None
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    return dt.date.fromisoformat(str(value))


def _to_decimal(value: Any) -> Optional[Decimal]:
    if value is None:
        return None
    if isinstance(value, Decimal):
        amount = value
    else:
        # str() first so floats parsed from YAML/JSON keep their written digits
        amount = Decimal(str(value))
    if not amount.is_finite():
        raise ValueError(f"Amount must be finite, got {value!r}")
    return amount


def _iso(value: Optional[dt.date]) -> Optional[str]:
    return value.isoformat() if value is not None else None
