"""Settlement date adjustment for Friday/Saturday and Saturday/Sunday weekends (ignores holidays)."""
from __future__ import annotations

import datetime as dt
import logging
from typing import Iterable, List, Optional

from .trade_event import TradeEvent

logger = logging.getLogger(__name__)

ARABIC_CURRENCIES = frozenset({"AED", "SAR"})
DIRECTIONS = ("B", "S")

FRIDAY, SATURDAY, SUNDAY = 4, 5, 6

# weekday -> days to add; a single lookup, the shifted date is not re-checked
ARABIC_SHIFT = {FRIDAY: 2, SATURDAY: 1}
DEFAULT_SHIFT = {SATURDAY: 2, SUNDAY: 1}


def is_arabic_currency(currency: Optional[str]) -> bool:
    if currency is None:
        return False
    return currency.upper() in ARABIC_CURRENCIES


def next_business_day(settlement_date: dt.date, currency: Optional[str] = None) -> dt.date:
    """Return the first business day on or after settlement_date for the currency's market."""
    shifts = ARABIC_SHIFT if is_arabic_currency(currency) else DEFAULT_SHIFT
    offset = shifts.get(settlement_date.weekday(), 0)
    return settlement_date + dt.timedelta(days=offset)


def normalize_direction(direction: Optional[str]) -> Optional[str]:
    """Upper-cased direction code, or None when it is neither B nor S."""
    if direction is None:
        return None
    code = direction.upper()
    return code if code in DIRECTIONS else None


def adjust(events: Iterable[TradeEvent], direction: str) -> List[TradeEvent]:
    """Filter events by direction and return copies with adjusted settlement dates.

    Events without an indicator or a settlement date are dropped. Input order is kept
    and the input events are left untouched.
    """
    code = normalize_direction(direction)
    if code is None:
        logger.debug("Ignoring unknown direction %r", direction)
        return []

    adjusted: List[TradeEvent] = []
    for event in events:
        indicator = event.buy_sell_indicator
        if indicator is None or indicator.upper() != code:
            continue
        if event.settlement_date is None:
            logger.debug("Dropping %s trade without settlement date: %s", code, event.stock_name)
            continue
        settle_date = next_business_day(event.settlement_date, event.currency)
        adjusted.append(event.with_settlement_date(settle_date))
    return adjusted
