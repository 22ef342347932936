"""
MIME Resolver - extension to MIME type lookups over the mime-db dataset.

The database is fetched once from a remote URL and kept in memory for the
lifetime of the resolver, or loaded explicitly from a local JSON file.
"""

import json
import logging
import threading
from typing import Optional

import requests

from mimedb.utils.models import MimeTable
from mimedb.utils.mime_utils import (
    DEFAULT_MIME_DB_URL,
    DEFAULT_MIME_TYPE,
    get_extension,
    is_text_mime_type,
    normalize_extension,
)
from mimedb.utils.url_utils import validate_db_url
from mimedb.utils.masking import safe_url

logger = logging.getLogger(__name__)


class MimeResolverError(Exception):
    """Base exception for MimeResolver errors."""

    pass


class MimeDBFetchError(MimeResolverError):
    """Remote MIME database could not be fetched or parsed."""

    pass


class MimeResolver:
    """
    MIME type resolver.

    Holds a single MIME table. The table is fetched from `db_url` on the
    first lookup unless one was injected or loaded from a file beforehand.
    Once loaded, it is only ever replaced by a successful load_from_file().
    """

    def __init__(
        self,
        db_url: str = DEFAULT_MIME_DB_URL,
        table: Optional[MimeTable] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize MimeResolver.

        Args:
            db_url: URL of the mime-db JSON document
            table: Pre-built table, skips the remote fetch
            session: requests session used for the fetch
        """
        is_valid, error = validate_db_url(db_url)
        if not is_valid:
            raise ValueError(error)

        self.db_url = db_url.strip()
        self._session = session
        self._table: Optional[MimeTable] = table
        self._lock = threading.Lock()

    @property
    def is_loaded(self) -> bool:
        """True once a table is cached."""
        return self._table is not None

    @property
    def table(self) -> Optional[MimeTable]:
        """Cached table, or None. Never triggers a fetch."""
        return self._table

    def ensure_loaded(self) -> MimeTable:
        """
        Get the cached table, fetching it if the cache is empty.

        Concurrent callers wait on the lock, so only one fetch happens.

        Returns:
            The cached MimeTable

        Raises:
            MimeDBFetchError: If the fetch fails. The cache stays empty.
        """
        with self._lock:
            if self._table is None:
                self._table = self._fetch_table()
            return self._table

    def _fetch_table(self) -> MimeTable:
        """Fetch and parse the remote database. Blocking, no retry."""
        url = safe_url(self.db_url)
        logger.info(f"Fetching MIME database from {url}")

        session = self._session or requests.Session()
        try:
            response = session.get(self.db_url)
            response.raise_for_status()
            table = MimeTable.from_dict(response.json())
        except requests.RequestException as e:
            error_msg = safe_url(str(e))
            raise MimeDBFetchError(f"Failed to fetch MIME database: {error_msg}") from e
        except (ValueError, RecursionError) as e:
            raise MimeDBFetchError(f"Invalid MIME database at {url}: {e}") from e
        finally:
            if self._session is None:
                session.close()

        logger.info(f"Loaded {len(table)} MIME types from {url}")
        return table

    def resolve(self, extension: str) -> str:
        """
        Resolve an extension to a MIME type.

        Args:
            extension: Extension with or without leading dot ("jpg", ".jpg").
                       Matched case-sensitively.

        Returns:
            MIME type of the first entry listing the extension,
            or "application/octet-stream" if none does
        """
        table = self.ensure_loaded()

        ext = normalize_extension(extension)
        mime_type = table.lookup(ext)
        if mime_type is None:
            logger.debug(f"No MIME type for extension {ext!r}, using {DEFAULT_MIME_TYPE}")
            return DEFAULT_MIME_TYPE

        return mime_type

    def resolve_filename(self, filename: str) -> str:
        """
        Resolve a filename or path to a MIME type.

        Only the extension of the last path segment is used.

        Args:
            filename: File name or path (e.g., "/a/b/test.pdf")

        Returns:
            MIME type string
        """
        return self.resolve(get_extension(filename))

    def load_from_file(self, path: str) -> bool:
        """
        Replace the cached table with a mime-db JSON file.

        The table is only swapped in after the whole file has been read
        and validated. On failure the cache is left as it was.

        Args:
            path: Path to a mime-db JSON document

        Returns:
            True if the table was loaded
        """
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
            table = MimeTable.from_dict(data)
        except (OSError, ValueError, RecursionError) as e:  # MimeTableError is a ValueError
            logger.warning(f"Failed to load MIME database from {path}: {e}")
            return False

        with self._lock:
            self._table = table

        logger.info(f"Loaded {len(table)} MIME types from {path}")
        return True

    def extensions_for(self, mime_type: str) -> list[str]:
        """
        Get extensions registered for a MIME type.

        Args:
            mime_type: MIME type string

        Returns:
            Extensions without leading dot, empty if type is unknown
        """
        entry = self.ensure_loaded().get(mime_type)
        if entry is None:
            return []
        return list(entry.extensions)

    def extension_for(self, mime_type: str) -> Optional[str]:
        """
        Get the preferred file extension for a MIME type.

        Args:
            mime_type: MIME type string

        Returns:
            File extension (with dot) or None if unknown
        """
        extensions = self.extensions_for(mime_type)
        if not extensions:
            return None
        return "." + extensions[0]

    def charset_for(self, mime_type: str) -> Optional[str]:
        """Get the charset declared for a MIME type, if any."""
        entry = self.ensure_loaded().get(mime_type)
        if entry is None:
            return None
        return entry.charset

    def is_text(self, filename: str) -> bool:
        """
        Check if a file is likely a text file based on its MIME type.

        Args:
            filename: File name or path

        Returns:
            True if file is likely text-based
        """
        mime_type = self.resolve_filename(filename)
        return is_text_mime_type(mime_type, self.charset_for(mime_type))


_default_resolver: Optional[MimeResolver] = None
_default_lock = threading.Lock()


def get_default_resolver() -> MimeResolver:
    """Get the shared resolver used when no resolver is passed explicitly."""
    global _default_resolver
    with _default_lock:
        if _default_resolver is None:
            _default_resolver = MimeResolver()
        return _default_resolver


def set_default_resolver(resolver: Optional[MimeResolver]) -> None:
    """Replace the shared resolver. None drops it; the next use creates a new one."""
    global _default_resolver
    with _default_lock:
        _default_resolver = resolver


def extension_to_mime_type(extension: str, resolver: Optional[MimeResolver] = None) -> str:
    """Resolve an extension ("jpg" or ".jpg") to a MIME type."""
    return (resolver or get_default_resolver()).resolve(extension)


def filename_to_mime_type(filename: str, resolver: Optional[MimeResolver] = None) -> str:
    """Resolve a filename or path to a MIME type."""
    return (resolver or get_default_resolver()).resolve_filename(filename)


def load_mime_db_from_file(path: str, resolver: Optional[MimeResolver] = None) -> bool:
    """Load a mime-db JSON file into the resolver. Returns False on any failure."""
    return (resolver or get_default_resolver()).load_from_file(path)
