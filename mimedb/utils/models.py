"""
Data models for the MIME database.
"""

from dataclasses import dataclass, field
from typing import Any, Iterator, Optional
import json


class MimeTableError(ValueError):
    """Raised when a document does not have the shape of a MIME database."""

    pass


# Optional mime-db record fields mapped onto MimeEntry attributes
OPTIONAL_FIELD_TYPES = {
    "source": str,
    "charset": str,
    "compressible": bool,
}


@dataclass
class MimeEntry:
    """Record for one MIME type in the database."""

    extensions: list[str] = field(default_factory=list)  # No leading dot
    source: Optional[str] = None  # "iana", "apache", "nginx"...
    charset: Optional[str] = None
    compressible: Optional[bool] = None
    extra: dict[str, Any] = field(default_factory=dict)  # Tolerated, unused

    def to_dict(self) -> dict[str, Any]:
        """Convert to mime-db record shape, omitting unset fields."""
        data: dict[str, Any] = dict(self.extra)
        if self.source is not None:
            data["source"] = self.source
        if self.charset is not None:
            data["charset"] = self.charset
        if self.compressible is not None:
            data["compressible"] = self.compressible
        if self.extensions:
            data["extensions"] = list(self.extensions)
        return data

    @classmethod
    def from_dict(cls, data: Any) -> "MimeEntry":
        """
        Create from a mime-db record.

        Only `extensions` is required to be well formed. `source`, `charset`
        and `compressible` values of an unexpected type are left unset and
        kept verbatim in `extra`, together with any unknown fields.
        """
        if not isinstance(data, dict):
            raise MimeTableError(
                f"Record must be an object, got {type(data).__name__}"
            )

        extensions = data.get("extensions", [])
        if not isinstance(extensions, list) or not all(
            isinstance(ext, str) for ext in extensions
        ):
            raise MimeTableError("'extensions' must be a list of strings")

        typed = {}
        extra = {}
        for key, value in data.items():
            if key == "extensions":
                continue
            expected = OPTIONAL_FIELD_TYPES.get(key)
            if expected is not None and isinstance(value, expected):
                typed[key] = value
            else:
                extra[key] = value

        return cls(extensions=list(extensions), extra=extra, **typed)


class MimeTable:
    """
    Immutable mapping of MIME type name to MimeEntry.

    Keeps the definition order of the source document. An index from
    extension to MIME type is built once at construction; when several
    entries list the same extension, the first one in definition order
    owns it.
    """

    def __init__(self, entries: dict[str, MimeEntry]):
        self._entries = dict(entries)
        self._by_extension: dict[str, str] = {}
        for mime_type, entry in self._entries.items():
            for ext in entry.extensions:
                self._by_extension.setdefault(ext, mime_type)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __contains__(self, mime_type: object) -> bool:
        return mime_type in self._entries

    def __repr__(self) -> str:
        return f"MimeTable({len(self._entries)} types)"

    def get(self, mime_type: str) -> Optional[MimeEntry]:
        """Get entry for a MIME type, or None."""
        return self._entries.get(mime_type)

    def items(self):
        """Iterate (mime_type, entry) pairs in definition order."""
        return self._entries.items()

    def lookup(self, extension: str) -> Optional[str]:
        """
        Find the MIME type owning an extension.

        Args:
            extension: Extension without leading dot, matched case-sensitively

        Returns:
            First MIME type in definition order listing the extension, or None
        """
        if not extension:
            return None
        return self._by_extension.get(extension)

    def to_dict(self) -> dict[str, Any]:
        """Convert to mime-db document shape."""
        return {mime_type: entry.to_dict() for mime_type, entry in self._entries.items()}

    def to_json(self) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), ensure_ascii=False)

    @classmethod
    def from_dict(cls, data: Any) -> "MimeTable":
        """
        Create from a parsed mime-db document.

        Raises:
            MimeTableError: If the document or any record is malformed
        """
        if not isinstance(data, dict):
            raise MimeTableError(
                f"MIME database must be an object, got {type(data).__name__}"
            )

        entries = {}
        for mime_type, record in data.items():
            try:
                entries[mime_type] = MimeEntry.from_dict(record)
            except MimeTableError as e:
                raise MimeTableError(f"Invalid record for {mime_type!r}: {e}") from e

        return cls(entries)

    @classmethod
    def from_json(cls, json_str: str) -> "MimeTable":
        """Deserialize from JSON string."""
        data = json.loads(json_str)
        return cls.from_dict(data)
