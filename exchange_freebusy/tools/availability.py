"""Availability tool for the Exchange free/busy MCP server."""

import json
import logging
import os
from datetime import timedelta

from mcp.server.fastmcp import Context

from exchange_freebusy.errors import FreeBusyError
from exchange_freebusy.ews_client import EWSClient
from exchange_freebusy.models import (
    DEFAULT_TIME_ZONE,
    Availability,
    AvailabilityRequest,
    AvailabilityResult,
    AvailabilityStatus,
    CalendarEvent,
    EventSummary,
)
from exchange_freebusy.operation import get_user_availability as run_availability
from exchange_freebusy.server import mcp, AppContext
from exchange_freebusy.utils import format_datetime, parse_date

logger = logging.getLogger(__name__)


def _get_client(ctx: Context) -> EWSClient:
    """Extract the EWSClient from the MCP lifespan context."""
    app_ctx: AppContext = ctx.request_context.lifespan_context
    return app_ctx.client


def _event_summary(item) -> EventSummary:
    if not isinstance(item, CalendarEvent):
        return {"type": type(item).__name__}
    summary: EventSummary = {
        "start": format_datetime(item.start_time),
        "end": format_datetime(item.end_time),
        "busy_type": item.busy_type,
    }
    if item.details is not None:
        summary["subject"] = item.details.subject
        summary["location"] = item.details.location
        summary["is_meeting"] = item.details.is_meeting
        summary["is_recurring"] = item.details.is_recurring
        summary["is_private"] = item.details.is_private
    return summary


def summarize(params: AvailabilityRequest, result: AvailabilityResult) -> Availability:
    """Shape a decoded result as the tool's JSON payload."""
    statuses = result.merged_free_busy
    return {
        "email": params.email_address,
        "time_zone": params.time_zone,
        "interval_minutes": params.merged_free_busy_interval_in_minutes,
        "merged_freebusy": "".join(str(s.value) for s in statuses),
        "busy_slots": sum(1 for s in statuses if s != AvailabilityStatus.FREE),
        "free_slots": sum(1 for s in statuses if s == AvailabilityStatus.FREE),
        "events": [_event_summary(item) for item in result.items],
    }


@mcp.tool()
def get_user_availability(
    email: str,
    start_date: str,
    end_date: str = "",
    time_zone: str = "",
    interval_minutes: int = 60,
    ctx: Context = None,
) -> str:
    """Get merged free/busy status and busy events for a mailbox.

    Uses the EWS GetUserAvailability operation with a DetailedMerged view.

    Args:
        email: SMTP address of the mailbox to query.
        start_date: First day of the window (YYYY-MM-DD or DD.MM.YYYY).
        end_date: Last day of the window, inclusive. Defaults to start_date.
        time_zone: IANA timezone name for the window. Defaults to the
            EXCHANGE_TIME_ZONE environment variable, then Europe/London.
        interval_minutes: Width of each merged free/busy slot. Default 60.

    Returns:
        JSON object with merged_freebusy (one digit per slot:
        0 free, 1 tentative, 2 busy, 3 out of office, 4 no data),
        slot counts and the list of events.
    """
    client = _get_client(ctx)

    try:
        sd = parse_date(start_date)
        ed = parse_date(end_date) if end_date else sd
        params = AvailabilityRequest(
            time_zone=time_zone or os.environ.get("EXCHANGE_TIME_ZONE", "") or DEFAULT_TIME_ZONE,
            email_address=email,
            start_time=sd,
            end_time=ed + timedelta(days=1),
            merged_free_busy_interval_in_minutes=interval_minutes,
        )
    except ValueError as e:
        return json.dumps({"error": f"Invalid parameters: {e}"})

    try:
        result = run_availability(client, params)
    except FreeBusyError as e:
        logger.warning("GetUserAvailability for %s failed: %s", email, e)
        return json.dumps({
            "error": str(e),
            "status_code": e.status_code,
            "retryable": e.retryable,
        })

    return json.dumps(summarize(params, result), ensure_ascii=False)
