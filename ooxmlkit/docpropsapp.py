"""Extended (application) document properties: ``docProps/app.xml``."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET

logger = logging.getLogger(__name__)

NS_EXTENDED = "http://schemas.openxmlformats.org/officeDocument/2006/extended-properties"
NS_VT = "http://schemas.openxmlformats.org/officeDocument/2006/docPropsVTypes"

VALID_KEYS = ("manager", "company")

_XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'


def _text_element(parent: ET.Element, tag: str, text: str) -> ET.Element:
    elem = ET.SubElement(parent, tag)
    elem.text = text
    return elem


class AppProperties:
    """Application properties, heading pairs and part titles of a package."""

    def __init__(self) -> None:
        self.titles_of_parts: list[str] = []
        self.heading_pairs: list[tuple[str, int]] = []
        self._properties: dict[str, str] = {}

    def add_part_title(self, title: str) -> None:
        self.titles_of_parts.append(title)

    def add_heading_pair(self, name: str, value: int) -> None:
        self.heading_pairs.append((name, value))

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

    def to_xml(self) -> bytes:
        root = ET.Element("Properties", {"xmlns": NS_EXTENDED, "xmlns:vt": NS_VT})
        _text_element(root, "Application", "Microsoft Excel")
        _text_element(root, "DocSecurity", "0")
        _text_element(root, "ScaleCrop", "false")

        headings = ET.SubElement(root, "HeadingPairs")
        vector = ET.SubElement(
            headings,
            "vt:vector",
            {"size": str(len(self.heading_pairs) * 2), "baseType": "variant"},
        )
        for name, value in self.heading_pairs:
            _text_element(ET.SubElement(vector, "vt:variant"), "vt:lpstr", name)
            _text_element(ET.SubElement(vector, "vt:variant"), "vt:i4", str(value))

        titles = ET.SubElement(root, "TitlesOfParts")
        vector = ET.SubElement(
            titles,
            "vt:vector",
            {"size": str(len(self.titles_of_parts)), "baseType": "lpstr"},
        )
        for title in self.titles_of_parts:
            _text_element(vector, "vt:lpstr", title)

        if "manager" in self._properties:
            _text_element(root, "Manager", self._properties["manager"])
        # Company is always present in files written by spreadsheet applications.
        _text_element(root, "Company", self._properties.get("company", ""))
        _text_element(root, "LinksUpToDate", "false")
        _text_element(root, "SharedDoc", "false")
        _text_element(root, "HyperlinksChanged", "false")
        _text_element(root, "AppVersion", "12.0000")

        return (_XML_DECLARATION + ET.tostring(root, encoding="unicode")).encode("utf-8")

    def load_xml(self, data: bytes | str) -> None:
        """Read Manager and Company from app.xml; malformed input is logged and tolerated."""
        parser = ET.XMLPullParser(events=("end",))
        try:
            parser.feed(data)
            self._take_events(parser)
            parser.close()
            self._take_events(parser)
        except ET.ParseError as exc:
            logger.debug("Error when reading doc props app file: %s", exc)

    def _take_events(self, parser: ET.XMLPullParser) -> None:
        for _, elem in parser.read_events():
            local = elem.tag.rpartition("}")[2]
            if local == "Manager":
                self.set_property("manager", "".join(elem.itertext()))
            elif local == "Company":
                self.set_property("company", "".join(elem.itertext()))