"""Core document properties: ``docProps/core.xml``."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from datetime import datetime

logger = logging.getLogger(__name__)

NS_CP = "http://schemas.openxmlformats.org/package/2006/metadata/core-properties"
NS_DC = "http://purl.org/dc/elements/1.1/"
NS_DCTERMS = "http://purl.org/dc/terms/"
NS_DCMITYPE = "http://purl.org/dc/dcmitype/"
NS_XSI = "http://www.w3.org/2001/XMLSchema-instance"

VALID_KEYS = (
    "title",
    "subject",
    "keywords",
    "description",
    "category",
    "status",
    "created",
    "creator",
)

DEFAULT_CREATOR = "ooxmlkit"

_XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'

# (namespace, element) -> property key, as read from core.xml
_ELEMENT_KEYS = {
    (NS_DC, "subject"): "subject",
    (NS_DC, "title"): "title",
    (NS_DC, "creator"): "creator",
    (NS_DC, "description"): "description",
    (NS_CP, "keywords"): "keywords",
    (NS_DCTERMS, "created"): "created",
    (NS_CP, "category"): "category",
    (NS_CP, "contentStatus"): "status",
}


def _iso(moment: datetime) -> str:
    return moment.strftime("%Y-%m-%dT%H:%M:%S")


def _text_element(parent: ET.Element, tag: str, text: str) -> ET.Element:
    elem = ET.SubElement(parent, tag)
    elem.text = text
    return elem


class CoreProperties:
    """Title, subject, creator and the other core properties of a package."""

    def __init__(self) -> None:
        self._properties: dict[str, str] = {}

    def set_property(self, name: str, value: str) -> bool:
        """Set or, for an empty value, remove a property.

        Returns False without change if the name is not one of VALID_KEYS.
        """
        if name not in VALID_KEYS:
            return False
        if value:
            self._properties[name] = value
        else:
            self._properties.pop(name, None)
        return True

    def get_property(self, name: str) -> str:
        return self._properties.get(name, "")

    def property_names(self) -> list[str]:
        return sorted(self._properties)

    def to_xml(self, now: datetime | None = None) -> bytes:
        """Serialise as core.xml; ``now`` stamps the modification time."""
        stamp = _iso(now if now is not None else datetime.now())
        props = self._properties
        root = ET.Element(
            "cp:coreProperties",
            {
                "xmlns:cp": NS_CP,
                "xmlns:dc": NS_DC,
                "xmlns:dcterms": NS_DCTERMS,
                "xmlns:dcmitype": NS_DCMITYPE,
                "xmlns:xsi": NS_XSI,
            },
        )
        if "title" in props:
            _text_element(root, "dc:title", props["title"])
        if "subject" in props:
            _text_element(root, "dc:subject", props["subject"])
        creator = props.get("creator", DEFAULT_CREATOR)
        _text_element(root, "dc:creator", creator)
        if "keywords" in props:
            _text_element(root, "cp:keywords", props["keywords"])
        if "description" in props:
            _text_element(root, "dc:description", props["description"])
        _text_element(root, "cp:lastModifiedBy", creator)

        created = ET.SubElement(root, "dcterms:created", {"xsi:type": "dcterms:W3CDTF"})
        created.text = props.get("created", stamp)
        modified = ET.SubElement(root, "dcterms:modified", {"xsi:type": "dcterms:W3CDTF"})
        modified.text = stamp

        if "category" in props:
            _text_element(root, "cp:category", props["category"])
        if "status" in props:
            _text_element(root, "cp:contentStatus", props["status"])

        return (_XML_DECLARATION + ET.tostring(root, encoding="unicode")).encode("utf-8")

    def load_xml(self, data: bytes | str) -> None:
        """Read the known properties from core.xml; malformed input is logged and tolerated."""
        parser = ET.XMLPullParser(events=("end",))
        try:
            parser.feed(data)
            self._take_events(parser)
            parser.close()
            self._take_events(parser)
        except ET.ParseError as exc:
            logger.debug("Error when reading doc props core file: %s", exc)

    def _take_events(self, parser: ET.XMLPullParser) -> None:
        for _, elem in parser.read_events():
            ns, _, local = elem.tag[1:].partition("}") if elem.tag.startswith("{") else ("", "", elem.tag)
            key = _ELEMENT_KEYS.get((ns, local))
            if key is not None:
                self.set_property(key, "".join(elem.itertext()))