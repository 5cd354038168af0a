"""Daily settlement totals and top instrument per settlement date."""
from __future__ import annotations

import datetime as dt
import logging
from collections import defaultdict
from decimal import Decimal
from typing import Any, DefaultDict, Dict, Iterable, List, Sequence

from .settlement import DIRECTIONS, adjust, normalize_direction
from .trade_event import TradeEvent

logger = logging.getLogger(__name__)

DIRECTION_LABELS = {"B": "outgoing", "S": "incoming"}


def group_by_settlement_date(events: Iterable[TradeEvent], direction: str) -> Dict[dt.date, List[TradeEvent]]:
    groups: DefaultDict[dt.date, List[TradeEvent]] = defaultdict(list)
    for event in adjust(events, direction):
        groups[event.settlement_date].append(event)
    return dict(groups)


def total_by_date(events: Iterable[TradeEvent], direction: str) -> Dict[dt.date, Decimal]:
    """Summed notional amount per adjusted settlement date."""
    return {
        settle_date: sum((event.notional_amount() for event in group), Decimal("0"))
        for settle_date, group in group_by_settlement_date(events, direction).items()
    }


def top_by_date(events: Iterable[TradeEvent], direction: str) -> Dict[dt.date, str]:
    """Highest-notional stock name per adjusted settlement date; first seen wins ties."""
    ranking: Dict[dt.date, str] = {}
    for settle_date, group in group_by_settlement_date(events, direction).items():
        best = group[0]
        best_amount = best.notional_amount()
        for event in group[1:]:
            amount = event.notional_amount()
            if amount > best_amount:
                best, best_amount = event, amount
        ranking[settle_date] = best.stock_name or ""
    return ranking


def daily_report(events: Sequence[TradeEvent], directions: Sequence[str] = DIRECTIONS) -> Dict[str, Any]:
    """JSON-ready report with totals and rankings for each direction, dates ascending."""
    report: Dict[str, Any] = {"events": len(events)}
    for direction in directions:
        code = normalize_direction(direction)
        if code is None:
            logger.warning("Skipping unknown direction %r", direction)
            continue
        totals = total_by_date(events, code)
        tops = top_by_date(events, code)
        report[DIRECTION_LABELS[code]] = {
            "direction": code,
            "total_by_date": {d.isoformat(): totals[d] for d in sorted(totals)},
            "top_by_date": {d.isoformat(): tops[d] for d in sorted(tops)},
        }
        logger.debug("%s: %d settlement dates", DIRECTION_LABELS[code], len(totals))
    return report
