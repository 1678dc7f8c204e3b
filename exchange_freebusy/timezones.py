"""Timezone rule resolution for the GetUserAvailability TimeZone block."""

import logging
from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from exchange_freebusy.errors import TimezoneResolutionError
from exchange_freebusy.models import TimezoneRule

logger = logging.getLogger(__name__)


def _minutes(delta: timedelta | None) -> int:
    if delta is None:
        return 0
    return int(delta.total_seconds()) // 60


def get_zone(time_zone: str) -> ZoneInfo:
    """Load IANA zone data, wrapping lookup failures in TimezoneResolutionError."""
    try:
        return ZoneInfo(time_zone)
    except (ZoneInfoNotFoundError, ValueError, TypeError, OSError) as exc:
        raise TimezoneResolutionError(time_zone, exc) from exc


def _offset_at(zone: ZoneInfo, instant: datetime) -> int:
    return _minutes(instant.astimezone(zone).utcoffset())


def resolve(time_zone: str, at: datetime | None = None) -> TimezoneRule:
    """Compute the offsets of ``time_zone`` in effect at ``at``.

    A naive ``at`` is read as wall-clock time in the zone, an aware one is
    converted into it. Defaults to the current instant.

    ``utc_offset_minutes`` is the zone's base offset: the lowest offset
    among 1 January, 1 July and ``at`` itself in the year of ``at``.
    ``standard_offset_minutes`` is the adjustment on top of it in effect
    at ``at``, zero outside daylight-saving time. ``dst()`` is not used:
    tzdata gives it a negative value for some zones (Europe/Dublin in
    winter, Africa/Casablanca during Ramadan).
    """
    zone = get_zone(time_zone)

    if at is None:
        local = datetime.now(zone)
    elif at.tzinfo is None:
        local = at.replace(tzinfo=zone)
    else:
        local = at.astimezone(zone)

    total = _minutes(local.utcoffset())
    base = min(
        total,
        _offset_at(zone, datetime(local.year, 1, 1, 12, tzinfo=timezone.utc)),
        _offset_at(zone, datetime(local.year, 7, 1, 12, tzinfo=timezone.utc)),
    )
    adjustment = total - base

    rule = TimezoneRule(
        utc_offset_minutes=base,
        standard_offset_minutes=adjustment,
        daylight_saving_active=adjustment != 0,
    )
    logger.debug("Resolved %s at %s to %s", time_zone, local.isoformat(), rule)
    return rule
