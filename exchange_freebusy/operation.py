"""GetUserAvailability end to end: resolve, build, send, decode."""

import logging
import xml.etree.ElementTree as ET
from typing import Protocol

from exchange_freebusy import request, response, timezones
from exchange_freebusy.models import AvailabilityRequest, AvailabilityResult
from exchange_freebusy.registry import DEFAULT_REGISTRY, ItemRegistry

logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Delivers a request document and returns the response document."""

    def send(self, document: ET.Element) -> response.ResponseDocument:
        ...


def get_user_availability(
    transport: Transport,
    params: AvailabilityRequest | None = None,
    *,
    registry: ItemRegistry = DEFAULT_REGISTRY,
) -> AvailabilityResult:
    """Query free/busy data for one mailbox.

    The timezone rule is resolved at ``params.start_time``. Errors from
    any stage propagate unchanged; nothing is retried here.
    """
    params = params or AvailabilityRequest()
    rule = timezones.resolve(params.time_zone, params.start_time)
    document = request.build(params, rule)
    logger.info(
        "GetUserAvailability for %s in %s", params.email_address, params.time_zone
    )
    return response.decode(transport.send(document), registry)
