"""Thin EWS SOAP transport.

Posts a request envelope to Exchange.asmx over a caller-supplied
``requests.Session``. Authentication is configured on that session by the
caller; this client only detects an expired session and reports it.
"""

import logging
import os
import xml.etree.ElementTree as ET

import requests

from exchange_freebusy.errors import SessionExpiredError, TransportError
from exchange_freebusy.request import serialize

logger = logging.getLogger(__name__)


class EWSClient:
    """HTTP client for the EWS SOAP endpoint.

    Implements ``send(document) -> bytes``; no retries, a failed call
    raises TransportError (or SessionExpiredError on HTTP 401/440).
    """

    def __init__(
        self,
        ews_url: str | None = None,
        session: requests.Session | None = None,
        *,
        timeout: int = 30,
    ):
        self.ews_url = (
            ews_url
            or os.environ.get("EXCHANGE_EWS_URL", "")
        ).rstrip("/")
        if not self.ews_url:
            raise ValueError(
                "EWS URL not configured. Set the EXCHANGE_EWS_URL environment variable."
            )
        self.timeout = timeout
        self._session = session or requests.Session()

    def send(self, document: ET.Element) -> bytes:
        """POST one SOAP envelope and return the raw response body."""
        headers = {
            "Content-Type": "text/xml; charset=utf-8",
            "Accept": "text/xml",
        }

        try:
            resp = self._session.post(
                self.ews_url,
                data=serialize(document),
                headers=headers,
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as exc:
            logger.warning("EWS request to %s failed: %s", self.ews_url, exc)
            raise TransportError(f"Request failed: {exc}") from exc

        if resp.status_code in (401, 440):
            raise SessionExpiredError("Session expired (HTTP {}).".format(resp.status_code))

        content_type = resp.headers.get("Content-Type", "")
        if "text/html" in content_type:
            # Login redirects come back as HTTP 200 HTML pages
            body_snippet = resp.text[:300] if resp.text else ""
            raise SessionExpiredError(
                f"Session expired (HTML response, HTTP {resp.status_code}). "
                f"Snippet: {body_snippet}"
            )

        # EWS reports SOAP faults with HTTP 500 and an XML body; let the
        # decoder turn those into ServiceError.
        if resp.status_code >= 400 and "xml" not in content_type:
            body_snippet = resp.text[:300] if resp.text else ""
            logger.warning("EWS returned HTTP %s", resp.status_code)
            raise TransportError(
                f"Unexpected response (HTTP {resp.status_code}). Snippet: {body_snippet}"
            )

        return resp.content
