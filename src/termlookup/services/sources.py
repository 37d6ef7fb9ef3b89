"""HTTP clients for the dictionary and encyclopedia services.

Each source exposes ``fetch(encoded_term)`` and returns the raw status and
body. Status handling belongs to the response mappers, so non-2xx responses
are returned rather than raised; only transport failures raise.
"""

import logging
from types import TracebackType
from typing import NamedTuple, Protocol

import requests
from requests.exceptions import ConnectionError as RequestsConnectionError
from requests.exceptions import RequestException, Timeout

from termlookup.config.defaults import DEFAULT_LOOKUP_CONFIG
from termlookup.lib.errors import TransportError

logger = logging.getLogger(__name__)


class SourceResponse(NamedTuple):
    """Raw HTTP response from a source."""

    status: int
    body: bytes


class LookupSource(Protocol):
    """Anything that can fetch a percent-encoded term."""

    def fetch(self, encoded_term: str) -> SourceResponse: ...


class HttpSource:
    """Base class for sources reached over HTTP with ``requests``.

    Sessions are closed when used as a context manager or via ``close()``.
    """

    DEFAULT_BASE_URL = ""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float = float(DEFAULT_LOOKUP_CONFIG["timeout"]),
        user_agent: str = str(DEFAULT_LOOKUP_CONFIG["user_agent"]),
        session: requests.Session | None = None,
    ) -> None:
        """Initialize source with base URL and timeout.

        Args:
            base_url: Service base URL (defaults to DEFAULT_BASE_URL)
            timeout: Request timeout in seconds
            user_agent: Value of the identifying User-Agent header
            session: Existing session to reuse (a new one is created if None)
        """
        self.base_url = (base_url or self.DEFAULT_BASE_URL).rstrip("/")
        self.timeout = timeout
        self.user_agent = user_agent
        self._session = session or requests.Session()

    def __enter__(self) -> "HttpSource":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        self._session.close()

    def _get(self, url: str, headers: dict[str, str] | None = None) -> SourceResponse:
        """Execute a GET request with error handling.

        Args:
            url: Fully built request URL (term already percent-encoded)
            headers: Extra request headers

        Returns:
            SourceResponse with status code and raw body

        Raises:
            TransportError: Connection, DNS or timeout failure
        """
        logger.debug(f"GET {url}")
        try:
            response = self._session.get(url, headers=headers, timeout=self.timeout)
        except Timeout as e:
            logger.debug(f"GET {url} timed out after {self.timeout}s")
            raise TransportError(url, original_error=e) from e
        except RequestsConnectionError as e:
            logger.debug(f"GET {url} could not connect: {e}")
            raise TransportError(url, original_error=e) from e
        except RequestException as e:
            raise TransportError(url, original_error=e) from e

        logger.debug(f"GET {url} -> {response.status_code}")
        return SourceResponse(status=response.status_code, body=response.content)


class DictionarySource(HttpSource):
    """Client for the dictionaryapi.dev entries endpoint.

    Example:
        >>> with DictionarySource() as source:
        ...     response = source.fetch("caf%C3%A9")
    """

    DEFAULT_BASE_URL = str(DEFAULT_LOOKUP_CONFIG["dictionary_url"])

    def url_for(self, encoded_term: str) -> str:
        return f"{self.base_url}/api/v2/entries/en/{encoded_term}"

    def fetch(self, encoded_term: str) -> SourceResponse:
        """Fetch dictionary entries for an encoded term.

        Args:
            encoded_term: Term already percent-encoded

        Returns:
            Raw response; a 404 means the term is unknown

        Raises:
            TransportError: The service could not be reached
        """
        return self._get(self.url_for(encoded_term))


class EncyclopediaSource(HttpSource):
    """Client for the Wikipedia MediaWiki ``api.php`` extracts query."""

    QUERY_FLAGS = "action=query&prop=extracts&exintro&explaintext&redirects"

    DEFAULT_BASE_URL = str(DEFAULT_LOOKUP_CONFIG["encyclopedia_url"])

    def url_for(self, encoded_term: str) -> str:
        # Built by hand: the bare flags have no value and the title is pre-encoded
        return (
            f"{self.base_url}/w/api.php?{self.QUERY_FLAGS}"
            f"&titles={encoded_term}&format=json"
        )

    def fetch(self, encoded_term: str) -> SourceResponse:
        """Fetch the intro extract for an encoded page title.

        Args:
            encoded_term: Term already percent-encoded

        Returns:
            Raw response from the query API

        Raises:
            TransportError: The service could not be reached
        """
        return self._get(
            self.url_for(encoded_term), headers={"User-Agent": self.user_agent}
        )
