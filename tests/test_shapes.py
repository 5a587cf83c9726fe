import xml.etree.ElementTree as ET

from ooxmlkit.shapes import ShapeProperties

XDR = "http://schemas.openxmlformats.org/drawingml/2006/spreadsheetDrawing"
A = "http://schemas.openxmlformats.org/drawingml/2006/main"
R = "http://schemas.openxmlformats.org/officeDocument/2006/relationships"

CONNECTOR = f"""
<xdr:cxnSp xmlns:xdr="{XDR}" xmlns:a="{A}" macro="RunMe">
  <xdr:nvCxnSpPr>
    <xdr:cNvPr id="3" name="Straight Connector 2"/>
    <xdr:cNvCxnSpPr/>
  </xdr:nvCxnSpPr>
  <xdr:spPr bwMode="auto">
    <a:xfrm flipV="1">
      <a:off x="100" y="200"/>
      <a:ext cx="300" cy="400"/>
    </a:xfrm>
    <a:prstGeom prst=" line "><a:avLst/></a:prstGeom>
    <a:ln w="9525" cap="flat" cmpd="sng" algn="ctr">
      <a:headEnd type="triangle" w="med" len="med"/>
      <a:tailEnd type="none"/>
    </a:ln>
  </xdr:spPr>
  <xdr:style>
    <a:lnRef idx="1"><a:schemeClr val="accent1"/></a:lnRef>
    <a:fillRef idx="0"><a:schemeClr val="accent2"/></a:fillRef>
    <a:effectRef idx="0"><a:schemeClr val="accent3"/></a:effectRef>
    <a:fontRef idx="minor"><a:schemeClr val="tx1"/></a:fontRef>
  </xdr:style>
</xdr:cxnSp>
"""


def _loaded_connector():
    props = ShapeProperties()
    props.load_connection_shape(ET.fromstring(CONNECTOR))
    return props


def _root():
    return ET.Element("root", {"xmlns:xdr": XDR, "xmlns:a": A})


def _reparse(root):
    return ET.fromstring(ET.tostring(root, encoding="unicode"))


def test_load_connection_shape_reads_names_and_geometry():
    props = _loaded_connector()
    assert props.cxn_macro == "RunMe"
    assert props.cnvpr_id == "3"
    assert props.cnvpr_name == "Straight Connector 2"
    assert props.bw_mode == "auto"
    assert props.flip_v == "1"
    assert props.pos == (100, 200)
    assert props.ext == (300, 400)
    assert props.prst_geom == "line"


def test_load_connection_shape_reads_line_and_ends():
    props = _loaded_connector()
    assert (props.ln_w, props.ln_cap, props.ln_cmpd, props.ln_algn) == (
        "9525",
        "flat",
        "sng",
        "ctr",
    )
    assert (props.head_end_type, props.head_end_w, props.head_end_len) == (
        "triangle",
        "med",
        "med",
    )
    assert (props.tail_end_type, props.tail_end_w, props.tail_end_len) == ("none", "", "")


def test_load_connection_shape_reads_style_references():
    props = _loaded_connector()
    assert (props.ln_ref_idx, props.ln_ref_val) == ("1", "accent1")
    assert (props.fill_ref_idx, props.fill_ref_val) == ("0", "accent2")
    assert (props.effect_ref_idx, props.effect_ref_val) == ("0", "accent3")
    assert (props.font_ref_idx, props.font_ref_val) == ("minor", "tx1")


def test_ext_without_preceding_off_is_ignored():
    xml = f'<xdr:cxnSp xmlns:xdr="{XDR}" xmlns:a="{A}"><a:ext cx="5" cy="6"/></xdr:cxnSp>'
    props = ShapeProperties()
    props.load_connection_shape(ET.fromstring(xml))
    assert props.ext == ShapeProperties().ext
    assert props.bw_mode is None


def test_connection_shape_round_trip():
    original = _loaded_connector()
    root = _root()
    original.write_connection_shape(root)
    element = _reparse(root).find(f"{{{XDR}}}cxnSp")
    again = ShapeProperties()
    again.load_connection_shape(element)
    assert again == original


def test_write_connection_shape_structure():
    root = _root()
    shape = _loaded_connector().write_connection_shape(root)
    assert shape.tag == "xdr:cxnSp"
    assert [child.tag for child in shape] == ["xdr:nvCxnSpPr", "xdr:spPr", "xdr:style"]
    style_tags = [child.tag for child in shape.find("xdr:style")]
    assert style_tags == ["a:lnRef", "a:fillRef", "a:effectRef", "a:fontRef"]


def test_line_attributes_need_width_and_cap():
    props = ShapeProperties(ln_w="9525", ln_cmpd="sng")
    root = _root()
    shape = props.write_connection_shape(root)
    line = shape.find("xdr:spPr").find("a:ln")
    assert line.attrib == {}
    assert line.find("a:headEnd") is None
    assert line.find("a:tailEnd") is None


def test_write_omits_empty_flip_and_bw_mode():
    shape = ShapeProperties().write_connection_shape(_root())
    sp_pr = shape.find("xdr:spPr")
    assert "bwMode" not in sp_pr.attrib
    assert "flipV" not in sp_pr.find("a:xfrm").attrib


def test_load_shape_keeps_only_macro_and_textlink():
    xml = (
        f'<xdr:sp xmlns:xdr="{XDR}" xmlns:a="{A}" macro="M1" textlink="$A$1">'
        '<xdr:spPr bwMode="auto"><a:prstGeom prst="rect"/></xdr:spPr></xdr:sp>'
    )
    props = ShapeProperties()
    props.load_shape(ET.fromstring(xml))
    assert props.macro == "M1"
    assert props.textlink == "$A$1"
    assert props.prst_geom == ""
    assert props.bw_mode is None


def test_write_shape_with_picture_reference():
    props = ShapeProperties(macro="M1", textlink="$A$1", prst_geom="rect", dpi=96)
    root = _root()
    shape = props.write_shape(root, "rId7")
    assert shape.get("macro") == "M1"
    assert shape.get("textlink") == "$A$1"
    blip_fill = shape.find("xdr:spPr").find("a:blipFill")
    assert blip_fill.get("dpi") == "96"
    blip = blip_fill.find("a:blip")
    assert blip.get("r:embed") == "rId7"
    assert blip.get("cstate") is None
    reparsed = _reparse(root)
    reblip = reparsed.find(f".//{{{A}}}blip")
    assert reblip.get(f"{{{R}}}embed") == "rId7"


def test_write_shape_without_picture_has_no_blip_fill():
    shape = ShapeProperties(prst_geom="rect").write_shape(_root())
    sp_pr = shape.find("xdr:spPr")
    assert sp_pr.find("a:blipFill") is None
    assert sp_pr.find("a:prstGeom").get("prst") == "rect"
    assert shape.find("xdr:nvSpPr").find("xdr:cNvPr").find("a:extLst") is not None


def test_write_shape_includes_cstate_when_set():
    props = ShapeProperties(blip_cstate="print")
    blip = props.write_shape(_root(), "rId2").find("xdr:spPr").find("a:blipFill").find("a:blip")
    assert blip.get("cstate") == "print"