import datetime
from typing import Optional, Tuple
from app.config.setting import settings
from app.shared.mongo_utils import utcnow


def _offset() -> datetime.timedelta:
    return datetime.timedelta(hours=settings.utc_offset_hours)


def to_local(value: datetime.datetime) -> datetime.datetime:
    """Stored timestamps are naive UTC; shift them onto the shop clock."""
    return value + _offset()


def local_today() -> datetime.date:
    return to_local(utcnow()).date()


def local_day_range(
    start_date: Optional[datetime.date], end_date: Optional[datetime.date]
) -> Tuple[datetime.datetime, datetime.datetime]:
    """
    UTC bounds ``[start, end)`` covering whole shop-clock days, inclusive of
    ``end_date``. Either side defaults to today.
    """
    today = local_today()
    start_date = start_date or today
    end_date = end_date or today
    if end_date < start_date:
        raise ValueError("End date must not be before start date")
    start = datetime.datetime.combine(start_date, datetime.time.min) - _offset()
    end = datetime.datetime.combine(end_date + datetime.timedelta(days=1), datetime.time.min) - _offset()
    return start, end


def local_date_to_utc(day: datetime.date, now: Optional[datetime.datetime] = None) -> datetime.datetime:
    """A shop-clock date stamped with the current shop-clock time of day, as naive UTC."""
    now = now or utcnow()
    local_time = to_local(now).time()
    return datetime.datetime.combine(day, local_time) - _offset()
