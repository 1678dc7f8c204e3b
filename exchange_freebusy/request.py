"""GetUserAvailability SOAP request construction.

http://msdn.microsoft.com/en-us/library/aa494212(v=exchg.80)
"""

import logging
import xml.etree.ElementTree as ET

from exchange_freebusy.models import AvailabilityRequest, TimezoneRule
from exchange_freebusy.utils import NS, format_wall_clock, qname, sub_element

logger = logging.getLogger(__name__)

# Transition rules are fixed to the Western European convention whatever
# zone was resolved: last Sunday of October 04:00 / last Sunday of March 03:00.
STANDARD_TRANSITION = {"Time": "04:00:00", "DayOrder": 5, "Month": 10, "DayOfWeek": "Sunday"}
DAYLIGHT_TRANSITION = {"Time": "03:00:00", "DayOrder": 5, "Month": 3, "DayOfWeek": "Sunday"}

REQUESTED_VIEW = "DetailedMerged"
ATTENDEE_TYPE = "Required"


def _add_transition(parent: ET.Element, name: str, bias: int, rule: dict) -> None:
    block = sub_element(parent, name)
    sub_element(block, "t:Bias", bias)
    for field in ("Time", "DayOrder", "Month", "DayOfWeek"):
        sub_element(block, f"t:{field}", rule[field])


def _add_time_zone(parent: ET.Element, rule: TimezoneRule) -> None:
    tz = sub_element(parent, "t:TimeZone")
    # UTC = local time + Bias
    sub_element(tz, "t:Bias", -rule.utc_offset_minutes)
    if rule.daylight_saving_active:
        _add_transition(tz, "t:StandardTime", 0, STANDARD_TRANSITION)
        _add_transition(tz, "t:DaylightTime", -rule.standard_offset_minutes, DAYLIGHT_TRANSITION)


def _add_mailbox(parent: ET.Element, email_address: str) -> None:
    array = sub_element(parent, "m:MailboxDataArray")
    mailbox = sub_element(array, "t:MailboxData")
    email = sub_element(mailbox, "t:Email")
    sub_element(email, "t:Address", email_address)
    sub_element(mailbox, "t:AttendeeType", ATTENDEE_TYPE)
    sub_element(mailbox, "t:ExcludeConflicts", "false")


def _add_view_options(parent: ET.Element, params: AvailabilityRequest) -> None:
    options = sub_element(parent, "t:FreeBusyViewOptions")
    window = sub_element(options, "t:TimeWindow")
    sub_element(window, "t:StartTime", format_wall_clock(params.start_time))
    sub_element(window, "t:EndTime", format_wall_clock(params.end_time))
    sub_element(
        options,
        "t:MergedFreeBusyIntervalInMinutes",
        params.merged_free_busy_interval_in_minutes,
    )
    sub_element(options, "t:RequestedView", REQUESTED_VIEW)


def build(params: AvailabilityRequest, rule: TimezoneRule) -> ET.Element:
    """Build the soap:Envelope for a GetUserAvailability request.

    Pure: identical ``params`` and ``rule`` always give the same document.
    """
    params.validate()

    envelope = ET.Element(qname("soap:Envelope"))
    # xsi/xsd are never used by an element, so ElementTree would not declare them
    envelope.set("xmlns:xsi", NS["xsi"])
    envelope.set("xmlns:xsd", NS["xsd"])
    body = sub_element(envelope, "soap:Body")
    request = sub_element(body, "m:GetUserAvailabilityRequest")

    _add_time_zone(request, rule)
    _add_mailbox(request, params.email_address)
    _add_view_options(request, params)

    logger.debug(
        "Built GetUserAvailability for %s (%s to %s, %d min)",
        params.email_address,
        params.start_time,
        params.end_time,
        params.merged_free_busy_interval_in_minutes,
    )
    return envelope


def to_xml(params: AvailabilityRequest, rule: TimezoneRule) -> bytes:
    """Build the request and serialize it to UTF-8 bytes."""
    return serialize(build(params, rule))


def serialize(document: ET.Element) -> bytes:
    return ET.tostring(document, encoding="utf-8", xml_declaration=True)
