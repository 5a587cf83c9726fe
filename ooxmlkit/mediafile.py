"""Media files (images and the like) embedded in a package."""

from __future__ import annotations

import hashlib


class MediaFile:
    """A binary part of the package together with its suffix and MIME type."""

    def __init__(
        self,
        contents: bytes | None = None,
        suffix: str = "",
        mime_type: str = "",
        file_name: str = "",
    ) -> None:
        self.file_name = file_name
        self.suffix = suffix
        self.mime_type = mime_type
        self.contents = contents if contents is not None else b""
        self._hash_key = hashlib.md5(contents).digest() if contents is not None else b""
        self._index = 0
        self._index_valid = False

    def set(self, contents: bytes, suffix: str, mime_type: str = "") -> None:
        """Replace the contents, suffix and MIME type; the index becomes invalid."""
        self.contents = contents
        self.suffix = suffix
        self.mime_type = mime_type
        self._hash_key = hashlib.md5(contents).digest()
        self._index_valid = False

    @property
    def index(self) -> int:
        """Position of the file among the package's media files."""
        return self._index

    @index.setter
    def index(self, value: int) -> None:
        self._index = value
        self._index_valid = True

    @property
    def is_index_valid(self) -> bool:
        """Whether an index has been assigned since the last content change."""
        return self._index_valid

    @property
    def hash_key(self) -> bytes:
        """MD5 digest of the contents, empty for a file known only by name."""
        return self._hash_key