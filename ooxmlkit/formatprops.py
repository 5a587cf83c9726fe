"""Property storage shared by cell formats.

A format is a sparse map from property ids to values. Copies of a format
share their data until one of them is changed, and the serialised keys
used to de-duplicate fonts, fills, borders and whole formats are cached
on that shared data.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import IntEnum
from typing import Any


class FormatProperty(IntEnum):
    """Identifiers of the properties a format can hold."""

    NUMFMT_ID = 0
    NUMFMT_FORMAT_CODE = 1

    FONT_SIZE = 2
    FONT_ITALIC = 3
    FONT_STRIKE_OUT = 4
    FONT_COLOR = 5
    FONT_BOLD = 6
    FONT_SCRIPT = 7
    FONT_UNDERLINE = 8
    FONT_OUTLINE = 9
    FONT_SHADOW = 10
    FONT_NAME = 11
    FONT_FAMILY = 12
    FONT_CHARSET = 13
    FONT_SCHEME = 14
    FONT_CONDENSE = 15
    FONT_EXTEND = 16

    BORDER_LEFT_STYLE = 17
    BORDER_RIGHT_STYLE = 18
    BORDER_TOP_STYLE = 19
    BORDER_BOTTOM_STYLE = 20
    BORDER_DIAGONAL_STYLE = 21
    BORDER_LEFT_COLOR = 22
    BORDER_RIGHT_COLOR = 23
    BORDER_TOP_COLOR = 24
    BORDER_BOTTOM_COLOR = 25
    BORDER_DIAGONAL_COLOR = 26
    BORDER_DIAGONAL_TYPE = 27

    FILL_PATTERN = 28
    FILL_BG_COLOR = 29
    FILL_FG_COLOR = 30

    ALIGNMENT_ALIGN_H = 31
    ALIGNMENT_ALIGN_V = 32
    ALIGNMENT_WRAP = 33
    ALIGNMENT_ROTATION = 34
    ALIGNMENT_INDENT = 35
    ALIGNMENT_SHRINK_TO_FIT = 36

    PROTECTION_HIDDEN = 37
    PROTECTION_LOCKED = 38


FONT_IDS = range(FormatProperty.FONT_SIZE, FormatProperty.FONT_EXTEND + 1)
BORDER_IDS = range(FormatProperty.BORDER_LEFT_STYLE, FormatProperty.BORDER_DIAGONAL_TYPE + 1)
FILL_IDS = range(FormatProperty.FILL_PATTERN, FormatProperty.FILL_FG_COLOR + 1)
ALIGNMENT_IDS = range(FormatProperty.ALIGNMENT_ALIGN_H, FormatProperty.ALIGNMENT_SHRINK_TO_FIT + 1)


def _same(a: Any, b: Any) -> bool:
    """Value equality that keeps booleans apart from integers."""
    if a is None or b is None:
        return a is b
    if isinstance(a, bool) != isinstance(b, bool):
        return False
    return a == b


def _key_token(pid: int, value: Any) -> str:
    if isinstance(value, int) and not isinstance(value, bool):
        value = int(value)
    return f"{pid}:{type(value).__name__}:{value!r};"


def _make_key(items) -> bytes:
    return "".join(_key_token(pid, value) for pid, value in items).encode("utf-8")


@dataclass
class _FormatData:
    properties: dict[int, Any] = field(default_factory=dict)
    dirty: bool = True
    format_key: bytes = b""
    font_dirty: bool = True
    font_index_valid: bool = False
    font_key: bytes = b""
    font_index: int = 0
    fill_dirty: bool = True
    fill_index_valid: bool = False
    fill_key: bytes = b""
    fill_index: int = 0
    border_dirty: bool = True
    border_index_valid: bool = False
    border_key: bytes = b""
    border_index: int = 0
    xf_index: int = -1
    xf_index_valid: bool = False
    is_dxf_format: bool = False
    dxf_index: int = -1
    dxf_index_valid: bool = False
    theme: int = 0

    def clone(self) -> _FormatData:
        return replace(self, properties=dict(self.properties))


class FormatBase:
    """A sparse, copy-on-write set of format properties.

    A fresh format has no data at all and is invalid; setting any
    property or index makes it valid.
    """

    def __init__(self) -> None:
        self._d: _FormatData | None = None

    def copy(self):
        """A new format sharing this one's data until either is changed."""
        other = type(self).__new__(type(self))
        FormatBase.__init__(other)
        other._d = self._d
        return other

    def _ensure_data(self) -> _FormatData:
        if self._d is None:
            self._d = _FormatData()
        return self._d

    def _detach(self) -> None:
        if self._d is not None:
            self._d = self._d.clone()

    # --- raw property access -------------------------------------------

    def get_property(self, prop: int, default: Any = None) -> Any:
        if self._d is not None:
            return self._d.properties.get(int(prop), default)
        return default

    def set_property(
        self, prop: int, value: Any, clear_value: Any = None, detach: bool = True
    ) -> None:
        """Store ``value``; a value equal to ``clear_value`` removes the property.

        With ``detach`` False the change is made on data shared with copies.
        """
        d = self._ensure_data()
        pid = int(prop)
        if not _same(value, clear_value):
            if pid in d.properties and _same(d.properties[pid], value):
                return
            if detach:
                self._detach()
            self._d.properties[pid] = value
        else:
            if pid not in d.properties:
                return
            if detach:
                self._detach()
            del self._d.properties[pid]

        d = self._d
        d.dirty = True
        d.xf_index_valid = False
        d.dxf_index_valid = False
        if pid in FONT_IDS:
            d.font_dirty = True
            d.font_index_valid = False
        elif pid in BORDER_IDS:
            d.border_dirty = True
            d.border_index_valid = False
        elif pid in FILL_IDS:
            d.fill_dirty = True
            d.fill_index_valid = False

    def clear_property(self, prop: int) -> None:
        self.set_property(prop, None)

    def has_property(self, prop: int) -> bool:
        return self._d is not None and int(prop) in self._d.properties

    def _typed_property(self, prop: int, types: tuple, default: Any) -> Any:
        if not self.has_property(prop):
            return default
        value = self._d.properties[int(prop)]
        if not isinstance(value, types):
            return default
        return value

    def _bool_property(self, prop: int, default: bool = False) -> bool:
        return self._typed_property(prop, (bool,), default)

    def _int_property(self, prop: int, default: int = 0) -> int:
        value = self._typed_property(prop, (int,), default)
        if isinstance(value, bool):
            return default
        return int(value)

    def _float_property(self, prop: int, default: float = 0.0) -> float:
        return float(self._typed_property(prop, (float,), default))

    def _str_property(self, prop: int, default: str = "") -> str:
        return self._typed_property(prop, (str,), default)

    # --- group queries ---------------------------------------------------

    def _has_any(self, ids) -> bool:
        return self._d is not None and any(pid in self._d.properties for pid in ids)

    def has_num_fmt_data(self) -> bool:
        return self._has_any((FormatProperty.NUMFMT_ID, FormatProperty.NUMFMT_FORMAT_CODE))

    def has_font_data(self) -> bool:
        return self._has_any(FONT_IDS)

    def has_alignment_data(self) -> bool:
        return self._has_any(ALIGNMENT_IDS)

    def has_border_data(self) -> bool:
        return self._has_any(BORDER_IDS)

    def has_fill_data(self) -> bool:
        return self._has_any(FILL_IDS)

    def has_protection_data(self) -> bool:
        return self._has_any((FormatProperty.PROTECTION_HIDDEN, FormatProperty.PROTECTION_LOCKED))

    # --- style-table indexes ---------------------------------------------

    @property
    def font_index_valid(self) -> bool:
        return self.has_font_data() and self._d.font_index_valid

    @property
    def font_index(self) -> int:
        return self._d.font_index if self.font_index_valid else 0

    @font_index.setter
    def font_index(self, index: int) -> None:
        d = self._ensure_data()
        d.font_index = index
        d.font_index_valid = True

    @property
    def border_index_valid(self) -> bool:
        return self.has_border_data() and self._d.border_index_valid

    @property
    def border_index(self) -> int:
        return self._d.border_index if self.border_index_valid else 0

    @border_index.setter
    def border_index(self, index: int) -> None:
        d = self._ensure_data()
        d.border_index = index
        d.border_index_valid = True

    @property
    def fill_index_valid(self) -> bool:
        return self.has_fill_data() and self._d.fill_index_valid

    @property
    def fill_index(self) -> int:
        return self._d.fill_index if self.fill_index_valid else 0

    @fill_index.setter
    def fill_index(self, index: int) -> None:
        d = self._ensure_data()
        d.fill_index = index
        d.fill_index_valid = True

    @property
    def xf_index(self) -> int:
        return -1 if self._d is None else self._d.xf_index

    @xf_index.setter
    def xf_index(self, index: int) -> None:
        d = self._ensure_data()
        d.xf_index = index
        d.xf_index_valid = True

    @property
    def xf_index_valid(self) -> bool:
        return self._d is not None and self._d.xf_index_valid

    @property
    def dxf_index(self) -> int:
        return -1 if self._d is None else self._d.dxf_index

    @dxf_index.setter
    def dxf_index(self, index: int) -> None:
        d = self._ensure_data()
        d.dxf_index = index
        d.dxf_index_valid = True

    @property
    def dxf_index_valid(self) -> bool:
        return self._d is not None and self._d.dxf_index_valid

    @property
    def theme(self) -> int:
        return 0 if self._d is None else self._d.theme

    # --- keys ------------------------------------------------------------

    def _group_key(self, ids: range, dirty_attr: str, key_attr: str) -> bytes:
        if self.is_empty():
            return b""
        d = self._d
        if getattr(d, dirty_attr):
            items = ((pid, d.properties[pid]) for pid in ids if pid in d.properties)
            setattr(d, key_attr, _make_key(items))
            setattr(d, dirty_attr, False)
        return getattr(d, key_attr)

    def font_key(self) -> bytes:
        return self._group_key(FONT_IDS, "font_dirty", "font_key")

    def border_key(self) -> bytes:
        return self._group_key(BORDER_IDS, "border_dirty", "border_key")

    def fill_key(self) -> bytes:
        return self._group_key(FILL_IDS, "fill_dirty", "fill_key")

    def format_key(self) -> bytes:
        if self.is_empty():
            return b""
        d = self._d
        if d.dirty:
            d.format_key = _make_key(sorted(d.properties.items()))
            d.dirty = False
        return d.format_key

    # --- whole-format operations -----------------------------------------

    def merge_format(self, modifier: FormatBase) -> None:
        """Apply every property of ``modifier`` on top of this format."""
        if not modifier.is_valid():
            return
        if not self.is_valid():
            self._d = modifier._d
            return
        for pid, value in sorted(modifier._d.properties.items()):
            self.set_property(pid, value)

    def is_valid(self) -> bool:
        return self._d is not None

    def is_empty(self) -> bool:
        return self._d is None or not self._d.properties

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FormatBase):
            return NotImplemented
        return self.format_key() == other.format_key()

    def __hash__(self) -> int:
        return hash(self.format_key())

    def __repr__(self) -> str:
        props = {} if self._d is None else self._d.properties
        shown = {FormatProperty(pid).name: value for pid, value in sorted(props.items())}
        return f"{type(self).__name__}({shown})"