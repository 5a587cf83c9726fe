"""Package relationship parts (the ``.rels`` files)."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from collections.abc import Iterator
from dataclasses import dataclass

SCHEMA_DOC = "http://schemas.openxmlformats.org/officeDocument/2006/relationships"
SCHEMA_MS_PACKAGE = "http://schemas.microsoft.com/office/2006/relationships"
SCHEMA_PACKAGE = "http://schemas.openxmlformats.org/package/2006/relationships"

_XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'


def _local_name(tag: str) -> str:
    return tag.rpartition("}")[2]


@dataclass
class Relationship:
    """One relationship from a part to a target."""

    id: str = ""
    type: str = ""
    target: str = ""
    target_mode: str | None = None


class Relationships:
    """An ordered collection of relationships, as stored in a ``.rels`` part."""

    def __init__(self) -> None:
        self._items: list[Relationship] = []

    def document_relationships(self, relative_type: str) -> list[Relationship]:
        return self.relationships(SCHEMA_DOC + relative_type)

    def add_document_relationship(self, relative_type: str, target: str) -> None:
        self.add_relationship(SCHEMA_DOC + relative_type, target)

    def ms_package_relationships(self, relative_type: str) -> list[Relationship]:
        return self.relationships(SCHEMA_MS_PACKAGE + relative_type)

    def add_ms_package_relationship(self, relative_type: str, target: str) -> None:
        self.add_relationship(SCHEMA_MS_PACKAGE + relative_type, target)

    def package_relationships(self, relative_type: str) -> list[Relationship]:
        return self.relationships(SCHEMA_PACKAGE + relative_type)

    def add_package_relationship(self, relative_type: str, target: str) -> None:
        self.add_relationship(SCHEMA_PACKAGE + relative_type, target)

    def worksheet_relationships(self, relative_type: str) -> list[Relationship]:
        return self.relationships(SCHEMA_DOC + relative_type)

    def add_worksheet_relationship(
        self, relative_type: str, target: str, target_mode: str | None = None
    ) -> None:
        self.add_relationship(SCHEMA_DOC + relative_type, target, target_mode)

    def relationships(self, type_: str) -> list[Relationship]:
        """All relationships of the given full type, in order."""
        return [rel for rel in self._items if rel.type == type_]

    def add_relationship(self, type_: str, target: str, target_mode: str | None = None) -> None:
        """Append a relationship, numbering it ``rId<n>``."""
        rel_id = f"rId{len(self._items) + 1}"
        self._items.append(Relationship(rel_id, type_, target, target_mode))

    def get_by_id(self, id_: str) -> Relationship | None:
        """The relationship with the given id, or None."""
        return next((rel for rel in self._items if rel.id == id_), None)

    def clear(self) -> None:
        self._items.clear()

    def to_xml(self) -> bytes:
        """Serialise the relationships as a ``.rels`` XML document."""
        root = ET.Element("Relationships", {"xmlns": SCHEMA_PACKAGE})
        for rel in self._items:
            attrs = {"Id": rel.id, "Type": rel.type, "Target": rel.target}
            if rel.target_mode is not None:
                attrs["TargetMode"] = rel.target_mode
            ET.SubElement(root, "Relationship", attrs)
        return (_XML_DECLARATION + ET.tostring(root, encoding="unicode")).encode("utf-8")

    def load_xml(self, data: bytes | str) -> None:
        """Replace the contents with those read from ``.rels`` XML.

        Raises ValueError if the XML is malformed; relationships read
        before the error are kept.
        """
        self.clear()
        parser = ET.XMLPullParser(events=("start",))
        try:
            parser.feed(data)
            self._take_events(parser)
            parser.close()
            self._take_events(parser)
        except ET.ParseError as exc:
            raise ValueError(f"malformed relationships XML: {exc}") from exc

    def _take_events(self, parser: ET.XMLPullParser) -> None:
        for _, elem in parser.read_events():
            if _local_name(elem.tag) == "Relationship":
                self._items.append(
                    Relationship(
                        elem.get("Id", ""),
                        elem.get("Type", ""),
                        elem.get("Target", ""),
                        elem.get("TargetMode"),
                    )
                )

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Relationship]:
        return iter(self._items)