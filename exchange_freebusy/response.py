"""GetUserAvailability SOAP response decoding.

Decoding is all-or-nothing: any unexpected node, status character or item
tag raises, and no partial result is returned.
"""

import logging
import xml.etree.ElementTree as ET
from typing import Any

from exchange_freebusy.errors import (
    InvalidStatusCodeError,
    MalformedResponseError,
    ServiceError,
    UnknownItemTypeError,
)
from exchange_freebusy.models import AvailabilityResult, AvailabilityStatus
from exchange_freebusy.registry import DEFAULT_REGISTRY, ItemRegistry
from exchange_freebusy.utils import child_text, local_name, qname

logger = logging.getLogger(__name__)

STATUS_CODES = {str(status.value): status for status in AvailabilityStatus}

ResponseDocument = ET.Element | ET.ElementTree | bytes | str


def as_element(document: ResponseDocument) -> ET.Element:
    """Return the root element of a parsed or raw response document."""
    if isinstance(document, ET.ElementTree):
        return document.getroot()
    if isinstance(document, ET.Element):
        return document
    try:
        return ET.fromstring(document)
    except ET.ParseError as exc:
        raise MalformedResponseError(f"Response is not well-formed XML: {exc}") from exc


def _require(root: ET.Element, name: str) -> ET.Element:
    node = root.find(f".//{qname(name)}")
    if node is None:
        raise MalformedResponseError(f"Response has no {name} element")
    return node


def check_response(document: ResponseDocument) -> None:
    """Raise ServiceError for a SOAP fault or an error ResponseMessage."""
    root = as_element(document)

    fault = root.find(f".//{qname('soap:Fault')}")
    if fault is not None:
        code = (fault.findtext("faultcode") or "soap:Fault").strip()
        message = (fault.findtext("faultstring") or "").strip()
        raise ServiceError(code, message)

    for message in root.iter(qname("m:ResponseMessage")):
        if message.get("ResponseClass") == "Error":
            raise ServiceError(
                child_text(message, "m:ResponseCode", "ErrorUnknown"),
                child_text(message, "m:MessageText"),
            )


def decode_availability(document: ResponseDocument) -> list[AvailabilityStatus]:
    """Map each MergedFreeBusy character to an AvailabilityStatus, in order.

    Characters outside '0'-'4' raise InvalidStatusCodeError.
    """
    node = _require(as_element(document), "t:MergedFreeBusy")
    statuses = []
    for position, code in enumerate((node.text or "").strip()):
        status = STATUS_CODES.get(code)
        if status is None:
            raise InvalidStatusCodeError(code, position)
        statuses.append(status)
    return statuses


def decode_items(
    document: ResponseDocument, registry: ItemRegistry = DEFAULT_REGISTRY
) -> list[Any]:
    """Build one record per CalendarEventArray child using ``registry``."""
    array = _require(as_element(document), "t:CalendarEventArray")
    items = []
    for child in array:
        if not isinstance(child.tag, str):
            continue
        tag = local_name(child.tag)
        constructor = registry.resolve(tag)
        if constructor is None:
            raise UnknownItemTypeError(tag)
        items.append(constructor(child))
    return items


def decode(
    document: ResponseDocument, registry: ItemRegistry = DEFAULT_REGISTRY
) -> AvailabilityResult:
    """Check for service errors, then decode free/busy and calendar items."""
    root = as_element(document)
    check_response(root)
    result = AvailabilityResult(
        merged_free_busy=decode_availability(root),
        items=decode_items(root, registry),
    )
    logger.debug(
        "Decoded %d free/busy slots and %d calendar items",
        len(result.merged_free_busy),
        len(result.items),
    )
    return result
