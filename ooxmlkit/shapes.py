"""Properties of drawing shapes and connectors, and their XML form."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass

NS_R = "http://schemas.openxmlformats.org/officeDocument/2006/relationships"

# Style reference elements and the attribute prefix that stores them.
_REF_FIELDS = {
    "lnRef": "ln_ref",
    "fillRef": "fill_ref",
    "effectRef": "effect_ref",
    "fontRef": "font_ref",
}
_REF_ORDER = (
    ("a:lnRef", "ln_ref"),
    ("a:fillRef", "fill_ref"),
    ("a:effectRef", "effect_ref"),
    ("a:fontRef", "font_ref"),
)


def _local(tag: str) -> str:
    return tag.rpartition("}")[2]


def _attr(elem: ET.Element, name: str) -> str:
    return elem.get(name, "").strip()


def _to_int(text: str | None) -> int:
    try:
        return int(text or "")
    except ValueError:
        return 0


@dataclass
class ShapeProperties:
    """Geometry, line and style settings of a shape or connector.

    ``ext`` defaults to the invalid size ``(-1, -1)`` until read.
    ``bw_mode`` and ``blip_cstate`` are None when absent.
    """

    macro: str = ""
    textlink: str = ""
    cxn_macro: str = ""
    cnvpr_name: str = ""
    cnvpr_id: str = ""
    bw_mode: str | None = None
    flip_v: str = ""
    pos: tuple[int, int] = (0, 0)
    ext: tuple[int, int] = (-1, -1)
    prst_geom: str = ""
    ln_algn: str = ""
    ln_cmpd: str = ""
    ln_cap: str = ""
    ln_w: str = ""
    head_end_w: str = ""
    head_end_len: str = ""
    head_end_type: str = ""
    tail_end_w: str = ""
    tail_end_len: str = ""
    tail_end_type: str = ""
    ln_ref_idx: str = ""
    ln_ref_val: str = ""
    fill_ref_idx: str = ""
    fill_ref_val: str = ""
    effect_ref_idx: str = ""
    effect_ref_val: str = ""
    font_ref_idx: str = ""
    font_ref_val: str = ""
    blip_cstate: str | None = None
    dpi: int = 0
    rot_with_shape: int = 0

    # --- reading ---------------------------------------------------------

    def load_connection_shape(self, element: ET.Element) -> None:
        """Read a ``cxnSp`` element."""
        self.cxn_macro = element.get("macro", "")
        has_off = False
        items = iter(element.iter())
        next(items)  # the connector element itself
        for elem in items:
            name = _local(elem.tag)
            if name == "cNvPr":
                self.cnvpr_name = elem.get("name", "")
                self.cnvpr_id = elem.get("id", "")
            elif name == "spPr":
                self.bw_mode = elem.get("bwMode")
            elif name == "xfrm":
                self.flip_v = elem.get("flipV", "")
            elif name == "off":
                self.pos = (_to_int(elem.get("x")), _to_int(elem.get("y")))
                has_off = True
            elif name == "ext" and has_off:
                self.ext = (_to_int(elem.get("cx")), _to_int(elem.get("cy")))
                has_off = False
            elif name == "prstGeom":
                self.prst_geom = _attr(elem, "prst")
            elif name == "ln":
                self.ln_algn = _attr(elem, "algn")
                self.ln_cmpd = _attr(elem, "cmpd")
                self.ln_cap = _attr(elem, "cap")
                self.ln_w = _attr(elem, "w")
            elif name == "headEnd":
                self.head_end_w = _attr(elem, "w")
                self.head_end_len = _attr(elem, "len")
                self.head_end_type = _attr(elem, "type")
            elif name == "tailEnd":
                self.tail_end_w = _attr(elem, "w")
                self.tail_end_len = _attr(elem, "len")
                self.tail_end_type = _attr(elem, "type")
            elif name in _REF_FIELDS:
                prefix = _REF_FIELDS[name]
                setattr(self, prefix + "_idx", _attr(elem, "idx"))
                # The colour is taken from the element that follows.
                following = next(items, None)
                if following is not None and _local(following.tag) == "schemeClr":
                    setattr(self, prefix + "_val", _attr(following, "val"))

    def load_shape(self, element: ET.Element) -> None:
        """Read an ``sp`` element; only its macro and text link are kept."""
        self.textlink = element.get("textlink", "")
        self.macro = element.get("macro", "")

    # --- writing ---------------------------------------------------------

    def write_connection_shape(self, parent: ET.Element) -> ET.Element:
        """Append an ``xdr:cxnSp`` element to ``parent`` and return it."""
        shape = ET.SubElement(parent, "xdr:cxnSp", {"macro": self.cxn_macro})
        nv = ET.SubElement(shape, "xdr:nvCxnSpPr")
        ET.SubElement(nv, "xdr:cNvPr", {"id": self.cnvpr_id, "name": self.cnvpr_name})
        ET.SubElement(nv, "xdr:cNvCxnSpPr")

        sp_pr = self._write_sp_pr(shape)
        xfrm = ET.SubElement(sp_pr, "a:xfrm")
        if self.flip_v:
            xfrm.set("flipV", self.flip_v)
        self._write_off_ext(xfrm)
        self._write_prst_geom(sp_pr)
        self._write_line(sp_pr)
        self._write_style(shape)
        return shape

    def write_shape(self, parent: ET.Element, blip_rid: str | None = None) -> ET.Element:
        """Append an ``xdr:sp`` element to ``parent`` and return it.

        ``blip_rid`` is the relationship id of an attached picture, if any.
        """
        shape = ET.SubElement(
            parent, "xdr:sp", {"macro": self.macro, "textlink": self.textlink}
        )
        nv = ET.SubElement(shape, "xdr:nvSpPr")
        cnvpr = ET.SubElement(nv, "xdr:cNvPr", {"id": self.cnvpr_id, "name": self.cnvpr_name})
        ET.SubElement(cnvpr, "a:extLst")
        ET.SubElement(nv, "xdr:cNvSpPr")

        sp_pr = self._write_sp_pr(shape)
        xfrm = ET.SubElement(sp_pr, "a:xfrm")
        self._write_off_ext(xfrm)
        self._write_prst_geom(sp_pr)

        if blip_rid is not None:
            blip_fill = ET.SubElement(
                sp_pr,
                "a:blipFill",
                {"dpi": str(self.dpi), "rotWithShape": str(self.rot_with_shape)},
            )
            blip = ET.SubElement(blip_fill, "a:blip", {"r:embed": blip_rid, "xmlns:r": NS_R})
            if self.blip_cstate is not None:
                blip.set("cstate", self.blip_cstate)
            ET.SubElement(blip_fill, "a:srcRect")
            stretch = ET.SubElement(blip_fill, "a:stretch")
            ET.SubElement(stretch, "a:fillRect")

        self._write_line(sp_pr)
        self._write_style(shape)
        return shape

    def _write_sp_pr(self, shape: ET.Element) -> ET.Element:
        sp_pr = ET.SubElement(shape, "xdr:spPr")
        if self.bw_mode is not None:
            sp_pr.set("bwMode", self.bw_mode)
        return sp_pr

    def _write_off_ext(self, xfrm: ET.Element) -> None:
        ET.SubElement(xfrm, "a:off", {"x": str(self.pos[0]), "y": str(self.pos[1])})
        ET.SubElement(xfrm, "a:ext", {"cx": str(self.ext[0]), "cy": str(self.ext[1])})

    def _write_prst_geom(self, sp_pr: ET.Element) -> None:
        geom = ET.SubElement(sp_pr, "a:prstGeom", {"prst": self.prst_geom})
        ET.SubElement(geom, "a:avLst")

    def _write_line(self, sp_pr: ET.Element) -> None:
        line = ET.SubElement(sp_pr, "a:ln")
        if self.ln_w and self.ln_cap:
            for name, value in (
                ("w", self.ln_w),
                ("cap", self.ln_cap),
                ("cmpd", self.ln_cmpd),
                ("algn", self.ln_algn),
            ):
                if value:
                    line.set(name, value)
        for tag, kind, width, length in (
            ("a:headEnd", self.head_end_type, self.head_end_w, self.head_end_len),
            ("a:tailEnd", self.tail_end_type, self.tail_end_w, self.tail_end_len),
        ):
            if kind or width or length:
                end = ET.SubElement(line, tag)
                for name, value in (("type", kind), ("w", width), ("len", length)):
                    if value:
                        end.set(name, value)

    def _write_style(self, shape: ET.Element) -> None:
        style = ET.SubElement(shape, "xdr:style")
        for tag, prefix in _REF_ORDER:
            ref = ET.SubElement(style, tag, {"idx": getattr(self, prefix + "_idx")})
            ET.SubElement(ref, "a:schemeClr", {"val": getattr(self, prefix + "_val")})