"""Constructors turning CalendarEventArray children into typed records."""

import xml.etree.ElementTree as ET

from exchange_freebusy.errors import MalformedResponseError
from exchange_freebusy.models import CalendarEvent, CalendarEventDetails
from exchange_freebusy.utils import child_text, parse_bool, parse_iso_datetime, qname


def _parse_time(node: ET.Element, name: str):
    raw = child_text(node, name)
    if not raw:
        raise MalformedResponseError(f"CalendarEvent is missing {name}")
    try:
        return parse_iso_datetime(raw)
    except ValueError as exc:
        raise MalformedResponseError(f"CalendarEvent has invalid {name} {raw!r}") from exc


def calendar_event_details_from_xml(node: ET.Element) -> CalendarEventDetails:
    return CalendarEventDetails(
        id=child_text(node, "t:ID"),
        subject=child_text(node, "t:Subject"),
        location=child_text(node, "t:Location"),
        is_meeting=parse_bool(child_text(node, "t:IsMeeting", "false")),
        is_recurring=parse_bool(child_text(node, "t:IsRecurring", "false")),
        is_exception=parse_bool(child_text(node, "t:IsException", "false")),
        is_reminder_set=parse_bool(child_text(node, "t:IsReminderSet", "false")),
        is_private=parse_bool(child_text(node, "t:IsPrivate", "false")),
    )


def calendar_event_from_xml(node: ET.Element) -> CalendarEvent:
    """Build a CalendarEvent from a <t:CalendarEvent> element.

    CalendarEventDetails is only present when the mailbox grants detailed
    free/busy access, so ``details`` may be None.
    """
    details_node = node.find(qname("t:CalendarEventDetails"))
    return CalendarEvent(
        start_time=_parse_time(node, "t:StartTime"),
        end_time=_parse_time(node, "t:EndTime"),
        busy_type=child_text(node, "t:BusyType"),
        details=(
            calendar_event_details_from_xml(details_node)
            if details_node is not None
            else None
        ),
    )
