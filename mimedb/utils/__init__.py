"""
Utility modules for the MIME database resolver.
"""

from .models import MimeEntry, MimeTable, MimeTableError
from .url_utils import validate_db_url, get_url_type
from .masking import mask_url, safe_url
from .mime_utils import (
    DEFAULT_MIME_TYPE,
    DEFAULT_MIME_DB_URL,
    get_extension,
    normalize_extension,
    is_text_mime_type,
)

__all__ = [
    "MimeEntry",
    "MimeTable",
    "MimeTableError",
    "validate_db_url",
    "get_url_type",
    "mask_url",
    "safe_url",
    "DEFAULT_MIME_TYPE",
    "DEFAULT_MIME_DB_URL",
    "get_extension",
    "normalize_extension",
    "is_text_mime_type",
]
