"""Daily settlement reports over trade events."""
from .reporter import daily_report, top_by_date, total_by_date
from .settlement import adjust, next_business_day
from .trade_event import TradeEvent

__all__ = ["TradeEvent", "adjust", "next_business_day", "total_by_date", "top_by_date", "daily_report"]
