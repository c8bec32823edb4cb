"""
Range-of-motion and calendar helpers shared by the planner services.

Buckets are coarse self-reports, so each maps to one representative angle.
Elapsed time is measured in fixed 7x24h weeks, never calendar months.
"""

from datetime import date, datetime, time, timedelta, timezone
from typing import Optional, Union

from app.enums import RomBucket

# 150+ is pinned below its true value to stay conservative
BUCKET_ANGLES = {
    RomBucket.UNDER_60.value: 30,
    RomBucket.FROM_60_TO_90.value: 75,
    RomBucket.FROM_90_TO_120.value: 105,
    RomBucket.FROM_120_TO_150.value: 135,
    RomBucket.OVER_150.value: 165,
}

# Angle assumed when there is no log to read a bucket from
NO_LOG_ANGLE = 30

ONE_DAY = timedelta(days=1)
ONE_WEEK = timedelta(weeks=1)

DateLike = Union[date, datetime, str]


def bucket_to_angle(bucket) -> int:
    """Map a ROM bucket to its representative angle; unknown buckets give 0."""
    if isinstance(bucket, RomBucket):
        bucket = bucket.value
    return BUCKET_ANGLES.get(bucket, 0)


def _as_utc_datetime(value: DateLike) -> datetime:
    if isinstance(value, str):
        value = datetime.fromisoformat(value)
    if not isinstance(value, datetime):
        return datetime.combine(value, time.min)
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def weeks_since(value: DateLike, now: Optional[datetime] = None) -> int:
    """Whole weeks elapsed since `value`, floored (negative for future dates)."""
    now = _as_utc_datetime(now or datetime.utcnow())
    return (now - _as_utc_datetime(value)) // ONE_WEEK


def days_until(value: DateLike, now: Optional[datetime] = None) -> int:
    """Whole days remaining until `value`, floored."""
    now = _as_utc_datetime(now or datetime.utcnow())
    return (_as_utc_datetime(value) - now) // ONE_DAY


def day_of_week(now: Optional[datetime] = None) -> int:
    """Weekday index with Sunday=0 through Saturday=6."""
    now = now or datetime.utcnow()
    return (now.weekday() + 1) % 7
