import xml.etree.ElementTree as ET
from datetime import datetime

from ooxmlkit.docpropscore import (
    DEFAULT_CREATOR,
    NS_CP,
    NS_DC,
    NS_DCTERMS,
    NS_XSI,
    CoreProperties,
)


def _q(ns, name):
    return "{" + ns + "}" + name


def test_valid_and_invalid_keys():
    props = CoreProperties()
    assert props.set_property("title", "Report") is True
    assert props.set_property("manager", "Alice") is False
    assert props.property_names() == ["title"]
    assert props.get_property("manager") == ""


def test_empty_value_removes():
    props = CoreProperties()
    props.set_property("subject", "Sales")
    props.set_property("subject", "")
    assert props.property_names() == []


def test_round_trip_all_properties():
    props = CoreProperties()
    values = {
        "title": "Report",
        "subject": "Sales",
        "keywords": "q1 q2",
        "description": "Quarterly figures",
        "category": "Finance",
        "status": "Draft",
        "created": "2020-05-06T07:08:09",
        "creator": "Alice",
    }
    for key, value in values.items():
        props.set_property(key, value)
    loaded = CoreProperties()
    loaded.load_xml(props.to_xml())
    assert {k: loaded.get_property(k) for k in loaded.property_names()} == values


def test_default_creator_and_modifier():
    root = ET.fromstring(CoreProperties().to_xml())
    assert root.findtext(_q(NS_DC, "creator")) == DEFAULT_CREATOR
    assert root.findtext(_q(NS_CP, "lastModifiedBy")) == DEFAULT_CREATOR
    assert root.find(_q(NS_DC, "title")) is None


def test_timestamps_use_now():
    now = datetime(2024, 1, 2, 3, 4, 5)
    root = ET.fromstring(CoreProperties().to_xml(now=now))
    modified = root.find(_q(NS_DCTERMS, "modified"))
    created = root.find(_q(NS_DCTERMS, "created"))
    assert modified.text == "2024-01-02T03:04:05"
    assert created.text == modified.text
    assert modified.get(_q(NS_XSI, "type")) == "dcterms:W3CDTF"


def test_created_property_kept():
    props = CoreProperties()
    props.set_property("created", "2019-01-01T00:00:00")
    root = ET.fromstring(props.to_xml(now=datetime(2024, 1, 2, 3, 4, 5)))
    assert root.findtext(_q(NS_DCTERMS, "created")) == "2019-01-01T00:00:00"


def test_status_written_as_content_status():
    props = CoreProperties()
    props.set_property("status", "Final")
    root = ET.fromstring(props.to_xml())
    assert root.findtext(_q(NS_CP, "contentStatus")) == "Final"


def test_wrong_namespace_ignored():
    data = (
        '<cp:coreProperties xmlns:cp="' + NS_CP + '" xmlns:dc="' + NS_DC + '">'
        "<cp:title>Wrong</cp:title><dc:title>Right</dc:title></cp:coreProperties>"
    )
    props = CoreProperties()
    props.load_xml(data)
    assert props.get_property("title") == "Right"


def test_malformed_input_tolerated():
    props = CoreProperties()
    props.load_xml('<x xmlns:dc="' + NS_DC + '"><dc:subject>Kept</dc:subject><dc:title>')
    assert props.property_names() == ["subject"]
    assert props.get_property("subject") == "Kept"