"""
MIME type helpers shared by the resolver.
"""

import posixpath
from typing import Optional


# Default MIME type for unknown extensions
DEFAULT_MIME_TYPE = "application/octet-stream"

# jshttp mime-db, served as a single JSON document
DEFAULT_MIME_DB_URL = "https://cdn.jsdelivr.net/gh/jshttp/mime-db@master/db.json"

# Characters stripped from the start of an extension before matching
EXTENSION_SEPARATORS = "."

# Application types that carry text content
TEXT_APPLICATION_TYPES = frozenset(
    [
        "application/json",
        "application/xml",
        "application/javascript",
        "application/x-javascript",
        "application/typescript",
        "application/x-sh",
        "application/x-ndjson",
        "application/yaml",
        "application/toml",
    ]
)


def normalize_extension(extension: Optional[str]) -> str:
    """
    Strip leading separator characters from an extension.

    Case is preserved: "JPG" and "jpg" are different keys in the table.

    Args:
        extension: Extension with or without leading dot (e.g., ".jpg", "jpg")

    Returns:
        Extension without leading dots, or empty string
    """
    if not extension:
        return ""

    return extension.lstrip(EXTENSION_SEPARATORS)


def get_extension(filename: Optional[str]) -> str:
    """
    Get extension of a filename, including the leading dot.

    Only the final path segment is considered. Leading dots of the
    segment are ignored, so ".bashrc" has no extension.

    Args:
        filename: File name or path (e.g., "/a/b/test.pdf")

    Returns:
        Extension with leading dot (e.g., ".pdf"), or empty string
    """
    if not filename:
        return ""

    # Accept Windows separators too
    _, ext = posixpath.splitext(filename.replace("\\", "/"))
    return ext


def is_text_mime_type(mime_type: str, charset: Optional[str] = None) -> bool:
    """
    Check if a MIME type describes text content.

    Args:
        mime_type: MIME type string
        charset: Charset declared for the type in the database, if any

    Returns:
        True if content of this type is text-based
    """
    if not mime_type:
        return False

    if mime_type.startswith("text/"):
        return True

    if charset:
        return True

    if mime_type.endswith("+json") or mime_type.endswith("+xml"):
        return True

    return mime_type in TEXT_APPLICATION_TYPES
