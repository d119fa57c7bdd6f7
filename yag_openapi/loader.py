"""Loading of raw schema documents from URLs or local files."""

import logging
from pathlib import Path
from urllib.parse import urlparse

import httpx

from yag_openapi.exceptions import SchemaLoadError

__all__ = ['SchemaSourceLoader', 'is_url']

logger = logging.getLogger(__name__)


def is_url(text: str) -> bool:
    try:
        result = urlparse(text)
        return result.scheme in ('http', 'https') and bool(result.netloc)
    except ValueError:
        return False


class SchemaSourceLoader:
    """Reads OpenAPI documents as text from a URL or a file path.

    Decoding is left to the parser, so YAML and JSON sources are treated
    the same way.

    Example:
        >>> loader = SchemaSourceLoader()
        >>> text = loader.load('https://petstore.swagger.io/v2/swagger.json')
    """

    def __init__(self, http_client: httpx.Client | None = None, timeout: float = 30.0):
        """Initialize the loader.

        Args:
            http_client: Optional HTTP client to use for URL requests.
            timeout: Request timeout in seconds when no client is given.
        """
        self._http_client = http_client
        self._timeout = timeout

    def load(self, source: str) -> str:
        """Load the raw document text.

        Raises:
            SchemaLoadError: If the source cannot be read.
        """
        if is_url(source):
            return self._load_from_url(source)
        return self._load_from_file(source)

    def _load_from_url(self, url: str) -> str:
        logger.debug(f'Fetching schema from {url}')
        try:
            if self._http_client:
                response = self._http_client.get(url)
            else:
                response = httpx.get(url, follow_redirects=True, timeout=self._timeout)
            response.raise_for_status()
            return response.text
        except httpx.HTTPError as e:
            raise SchemaLoadError(url, cause=e) from e

    def _load_from_file(self, file_path: str) -> str:
        path = Path(file_path)
        if not path.exists():
            raise SchemaLoadError(
                file_path, cause=FileNotFoundError(f'File not found: {path}')
            )
        try:
            return path.read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            raise SchemaLoadError(file_path, cause=e) from e
