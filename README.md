# ooxmlkit

Pure-Python building blocks for individual parts of an `.xlsx` package:
package relationships, document properties, cell format property storage,
media files, number format codes and drawing shapes. Only the standard
library is used.

## Installation

```
pip install ooxmlkit
```

## Modules

- `ooxmlkit.numformat` – `is_date_time(format_code)` returns `True` if a
  number format code probably shows a date or a time. Only the first section
  of the code is looked at. Quoted text, escaped characters and bracketed
  conditions or colours are skipped. `[h]`, `[m]` and `[s]` count as time.
- `ooxmlkit.mediafile` – `MediaFile` is an embedded binary part with
  `contents`, `suffix`, `mime_type` and `file_name`. It has an MD5
  `hash_key` for spotting duplicates, and an `index` that stays valid
  (`is_index_valid`) until `set()` replaces the contents.
- `ooxmlkit.relationships` – `Relationship` (a dataclass with `id`, `type`,
  `target` and `target_mode`) and `Relationships`, an ordered collection for
  `.rels` parts. New entries are numbered `rId1`, `rId2`, and so on. There
  are helpers for document, package and Microsoft package relationship
  types. Use `to_xml()` and `load_xml(data)` to write and read the part;
  `load_xml` raises `ValueError` on malformed XML.
- `ooxmlkit.docpropsapp` – `AppProperties`, for `docProps/app.xml`. It
  covers heading pairs, part titles and the `manager` and `company`
  properties.
- `ooxmlkit.docpropscore` – `CoreProperties`, for `docProps/core.xml`. It
  covers `title`, `subject`, `keywords`, `description`, `category`,
  `status`, `created` and `creator`. `to_xml(now=None)` stamps the
  modification time with `now`, or with the current time if `now` is not
  given.
- `ooxmlkit.formatprops` – `FormatProperty` (the ids of all format
  properties) and `FormatBase`, a sparse, copy-on-write property map. It
  has:
  - group queries: `has_font_data()`, `has_border_data()` and the like;
  - style-table indexes: `font_index`, `fill_index`, `border_index`,
    `xf_index` and `dxf_index`;
  - cached de-duplication keys: `font_key()`, `fill_key()`,
    `border_key()` and `format_key()`;
  - `merge_format()`.

  Two formats compare equal when their format keys are equal.
- `ooxmlkit.shapes` – `ShapeProperties` holds the geometry, line and style
  settings of a drawing shape or connector. It reads `cxnSp` and `sp`
  elements from an ElementTree and writes `xdr:cxnSp` and `xdr:sp`
  elements into one.

## Examples

```python
from ooxmlkit.numformat import is_date_time
from ooxmlkit.relationships import Relationships

is_date_time("yyyy-mm-dd")   # True
is_date_time("0.00")         # False

rels = Relationships()
rels.add_document_relationship("/officeDocument", "xl/workbook.xml")
data = rels.to_xml()

loaded = Relationships()
loaded.load_xml(data)
print(len(loaded), loaded.get_by_id("rId1").target)
```

```python
from ooxmlkit.docpropscore import CoreProperties

props = CoreProperties()
props.set_property("title", "Quarterly report")
xml = props.to_xml()
```

`set_property` returns `False` for a property that the part does not
support. Setting a property to an empty string removes it. When no creator
is set, `CoreProperties` writes `ooxmlkit` as the creator.

```python
from ooxmlkit.formatprops import FormatBase, FormatProperty

fmt = FormatBase()
fmt.set_property(FormatProperty.FONT_BOLD, True, False)
copy = fmt.copy()
copy.set_property(FormatProperty.FONT_SIZE, 12, 0)   # fmt is unchanged
fmt.has_font_data()   # True
```

## What it does not do

ooxmlkit handles single parts only. It does not open, assemble or save
whole `.xlsx` zip packages, and it has no workbook, worksheet or cell
model.

For cell formats there is only the raw property store, `FormatBase`. It
has no named accessors such as font name or alignment, and no enums for
their values.

For drawings there are only the shape and connector properties in
`ShapeProperties`. Anchors, drawing parts, pictures and charts are not
handled.

## Running the tests

```
pip install -e ".[test]"
pytest
```