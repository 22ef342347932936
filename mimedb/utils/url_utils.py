"""
Database URL validation and type detection utilities.
"""

import re
from typing import Literal


UrlType = Literal["https", "local", "unknown"]


# Fetchable URL pattern
HTTPS_PATTERN = re.compile(
    r"^https?://(?:[^\s/@]+@)?[a-zA-Z0-9.-]+(?::\d+)?/[^\s]*$"
)


def get_url_type(url: str) -> UrlType:
    """
    Detect URL type.

    Args:
        url: Database URL

    Returns:
        URL type: "https", "local", or "unknown"
    """
    if not url:
        return "unknown"

    url = url.strip()

    # HTTPS
    if url.startswith("https://") or url.startswith("http://"):
        return "https"

    # Local path
    if url.startswith("/") or url.startswith("file://"):
        return "local"

    return "unknown"


def validate_db_url(url: str) -> tuple[bool, str]:
    """
    Validate a remote MIME database URL.

    Only HTTP(S) URLs can be fetched. Local databases are loaded
    through MimeResolver.load_from_file instead.

    Args:
        url: Database URL to validate

    Returns:
        Tuple of (is_valid, error_message)
        If valid, error_message is empty string.
    """
    if not url:
        return False, "MIME database URL is required"

    url = url.strip()
    url_type = get_url_type(url)

    if url_type == "https" and HTTPS_PATTERN.match(url):
        return True, ""

    if url_type == "local":
        return (
            False,
            "Local files are not fetched. Use load_from_file() with the path instead",
        )

    if url.startswith("ftp://"):
        return False, "ftp:// protocol is not supported. Use https://"

    return False, (
        "Invalid MIME database URL format. Supported formats:\n"
        "- HTTPS: https://cdn.jsdelivr.net/gh/jshttp/mime-db@master/db.json\n"
        "- HTTP: http://mirror.local/mime-db/db.json"
    )
