"""Shared test fixtures: canned EWS response documents and request params."""

import os

# Set before any exchange_freebusy import that may construct an EWSClient
os.environ.setdefault("EXCHANGE_EWS_URL", "https://mail.example.com/EWS/Exchange.asmx")

from datetime import datetime

import pytest

from exchange_freebusy.models import AvailabilityRequest

SOAP_NS = "http://schemas.xmlsoap.org/soap/envelope/"
TYPES_NS = "http://schemas.microsoft.com/exchange/services/2006/types"
MESSAGES_NS = "http://schemas.microsoft.com/exchange/services/2006/messages"

CALENDAR_EVENT = """
<t:CalendarEvent>
  <t:StartTime>{start}</t:StartTime>
  <t:EndTime>{end}</t:EndTime>
  <t:BusyType>{busy_type}</t:BusyType>
  {details}
</t:CalendarEvent>"""

EVENT_DETAILS = """
<t:CalendarEventDetails>
  <t:ID>{id}</t:ID>
  <t:Subject>{subject}</t:Subject>
  <t:Location>{location}</t:Location>
  <t:IsMeeting>true</t:IsMeeting>
  <t:IsRecurring>false</t:IsRecurring>
  <t:IsException>false</t:IsException>
  <t:IsReminderSet>true</t:IsReminderSet>
  <t:IsPrivate>false</t:IsPrivate>
</t:CalendarEventDetails>"""


def calendar_event_xml(
    start="2026-10-19T09:00:00",
    end="2026-10-19T10:00:00",
    busy_type="Busy",
    subject=None,
    location="Room 1",
    event_id="AAMkAD1",
):
    details = ""
    if subject is not None:
        details = EVENT_DETAILS.format(id=event_id, subject=subject, location=location)
    return CALENDAR_EVENT.format(start=start, end=end, busy_type=busy_type, details=details)


def availability_response(
    merged="0123401234",
    events=None,
    response_class="Success",
    response_code="NoError",
    message_text="",
    include_merged=True,
    include_events=True,
) -> bytes:
    """Build a GetUserAvailabilityResponse envelope as EWS returns it."""
    if events is None:
        events = [calendar_event_xml()]
    merged_xml = f"<t:MergedFreeBusy>{merged}</t:MergedFreeBusy>" if include_merged else ""
    events_xml = (
        f"<t:CalendarEventArray>{''.join(events)}</t:CalendarEventArray>"
        if include_events
        else ""
    )
    text_xml = f"<m:MessageText>{message_text}</m:MessageText>" if message_text else ""
    return f"""<?xml version="1.0" encoding="utf-8"?>
<soap:Envelope xmlns:soap="{SOAP_NS}">
  <soap:Body>
    <m:GetUserAvailabilityResponse xmlns:m="{MESSAGES_NS}" xmlns:t="{TYPES_NS}">
      <m:FreeBusyResponseArray>
        <m:FreeBusyResponse>
          <m:ResponseMessage ResponseClass="{response_class}">
            {text_xml}
            <m:ResponseCode>{response_code}</m:ResponseCode>
          </m:ResponseMessage>
          <m:FreeBusyView>
            <t:FreeBusyViewType>DetailedMerged</t:FreeBusyViewType>
            {merged_xml}
            {events_xml}
          </m:FreeBusyView>
        </m:FreeBusyResponse>
      </m:FreeBusyResponseArray>
    </m:GetUserAvailabilityResponse>
  </soap:Body>
</soap:Envelope>""".encode("utf-8")


@pytest.fixture
def summer_params():
    """A one-day window during British Summer Time."""
    return AvailabilityRequest(
        time_zone="Europe/London",
        email_address="jane.doe@example.com",
        start_time=datetime(2026, 7, 1, 0, 0, 1),
        end_time=datetime(2026, 7, 1, 23, 59, 59),
        merged_free_busy_interval_in_minutes=30,
    )
