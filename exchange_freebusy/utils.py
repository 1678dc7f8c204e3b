"""Shared helpers: EWS namespaces, element construction/lookup and
date/time formatting and parsing.
"""

import xml.etree.ElementTree as ET
from datetime import datetime

NS = {
    "xsi": "http://www.w3.org/2001/XMLSchema-instance",
    "xsd": "http://www.w3.org/2001/XMLSchema",
    "soap": "http://schemas.xmlsoap.org/soap/envelope/",
    "t": "http://schemas.microsoft.com/exchange/services/2006/types",
    "m": "http://schemas.microsoft.com/exchange/services/2006/messages",
}

for _prefix, _uri in NS.items():
    ET.register_namespace(_prefix, _uri)

WALL_CLOCK_FORMAT = "%Y-%m-%dT%H:%M:%S"


def qname(name: str) -> str:
    """Expand a prefixed name ('t:Bias') to ElementTree's '{uri}Bias' form."""
    prefix, _, local = name.rpartition(":")
    if not prefix:
        return local
    return f"{{{NS[prefix]}}}{local}"


def local_name(tag: str) -> str:
    """Strip the '{uri}' namespace part of an ElementTree tag."""
    return tag.rsplit("}", 1)[-1]


def sub_element(parent: ET.Element, name: str, text=None) -> ET.Element:
    """Append a child element; non-None ``text`` is stringified."""
    child = ET.SubElement(parent, qname(name))
    if text is not None:
        child.text = str(text)
    return child


def child_text(node: ET.Element, name: str, default: str = "") -> str:
    """Text of the first direct child called ``name``, or ``default``."""
    child = node.find(qname(name))
    if child is None or child.text is None:
        return default
    return child.text.strip()


def parse_bool(value: str) -> bool:
    """Parse an xs:boolean ('true'/'false'/'1'/'0')."""
    return value.strip().lower() in ("true", "1")


def format_wall_clock(dt: datetime) -> str:
    """Format a datetime as 'YYYY-MM-DDTHH:MM:SS' with no offset suffix."""
    return dt.strftime(WALL_CLOCK_FORMAT)


def parse_iso_datetime(dt_str: str) -> datetime:
    """Parse an ISO datetime string to a naive wall-clock datetime.

    Handles 'YYYY-MM-DDTHH:MM:SS' with optional fractional seconds and
    'Z'/'+HH:MM' suffixes, which are dropped.
    """
    clean = dt_str.strip()
    if clean.endswith("Z"):
        clean = clean[:-1]
    return datetime.fromisoformat(clean).replace(tzinfo=None)


def format_datetime(dt: datetime) -> str:
    """Format a datetime as 'YYYY-MM-DD HH:MM' for display."""
    return dt.strftime("%Y-%m-%d %H:%M")


def parse_date(date_str: str) -> datetime:
    """Parse a date string in common formats.

    Supports: YYYY-MM-DD, DD.MM.YYYY, DD/MM/YYYY, MM/DD/YYYY.
    """
    formats = ["%Y-%m-%d", "%d.%m.%Y", "%d/%m/%Y", "%m/%d/%Y"]
    for fmt in formats:
        try:
            return datetime.strptime(date_str, fmt)
        except ValueError:
            continue
    raise ValueError(f"Could not parse date: {date_str}")
