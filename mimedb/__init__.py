"""
MIME type resolution over the mime-db dataset.
"""

from .mime_resolver import (
    MimeResolver,
    MimeResolverError,
    MimeDBFetchError,
    extension_to_mime_type,
    filename_to_mime_type,
    load_mime_db_from_file,
    get_default_resolver,
    set_default_resolver,
)

__all__ = [
    "MimeResolver",
    "MimeResolverError",
    "MimeDBFetchError",
    "extension_to_mime_type",
    "filename_to_mime_type",
    "load_mime_db_from_file",
    "get_default_resolver",
    "set_default_resolver",
]
