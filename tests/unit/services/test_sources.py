"""Tests for the HTTP source clients.

The ``requests.Session`` is replaced with a mock so no network access is
needed.
"""

from unittest.mock import MagicMock

import pytest
import requests

from termlookup.lib.errors import TransportError
from termlookup.services.sources import (
    DictionarySource,
    EncyclopediaSource,
    SourceResponse,
)


def _session(status: int = 200, content: bytes = b"[]") -> MagicMock:
    session = MagicMock(spec=requests.Session)
    session.get.return_value = MagicMock(status_code=status, content=content)
    return session


class TestDictionarySource:
    """Tests for DictionarySource."""

    def test_builds_entries_url(self) -> None:
        source = DictionarySource(session=_session())
        assert source.url_for("caf%C3%A9") == (
            "https://api.dictionaryapi.dev/api/v2/entries/en/caf%C3%A9"
        )

    def test_custom_base_url_strips_trailing_slash(self) -> None:
        source = DictionarySource("http://localhost:8080/", session=_session())
        assert source.url_for("x") == "http://localhost:8080/api/v2/entries/en/x"

    def test_fetch_returns_status_and_body(self) -> None:
        session = _session(status=200, content=b'[{"meanings": []}]')
        source = DictionarySource(timeout=3.5, session=session)

        response = source.fetch("test")

        assert response == SourceResponse(status=200, body=b'[{"meanings": []}]')
        session.get.assert_called_once_with(
            "https://api.dictionaryapi.dev/api/v2/entries/en/test",
            headers=None,
            timeout=3.5,
        )

    def test_not_found_is_returned_not_raised(self) -> None:
        source = DictionarySource(session=_session(status=404, content=b"{}"))
        assert source.fetch("xyzzy").status == 404

    @pytest.mark.parametrize(
        "exception",
        [
            requests.exceptions.Timeout("read timed out"),
            requests.exceptions.ConnectionError("Name or service not known"),
            requests.exceptions.TooManyRedirects("too many"),
        ],
    )
    def test_transport_failures_raise_transport_error(self, exception) -> None:
        session = _session()
        session.get.side_effect = exception
        source = DictionarySource(session=session)

        with pytest.raises(TransportError) as exc_info:
            source.fetch("test")

        assert exc_info.value.original_error is exception
        assert exc_info.value.url.endswith("/api/v2/entries/en/test")

    def test_context_manager_closes_session(self) -> None:
        session = _session()
        with DictionarySource(session=session) as source:
            source.fetch("test")
        session.close.assert_called_once()


class TestEncyclopediaSource:
    """Tests for EncyclopediaSource."""

    def test_builds_extracts_query_url(self) -> None:
        source = EncyclopediaSource(session=_session())
        assert source.url_for("caf%C3%A9") == (
            "https://en.wikipedia.org/w/api.php?action=query&prop=extracts"
            "&exintro&explaintext&redirects&titles=caf%C3%A9&format=json"
        )

    def test_fetch_sends_user_agent(self) -> None:
        session = _session(content=b"{}")
        source = EncyclopediaSource(user_agent="tests/1.0", timeout=2.0, session=session)

        source.fetch("Paris")

        _, kwargs = session.get.call_args
        assert kwargs["headers"] == {"User-Agent": "tests/1.0"}
        assert kwargs["timeout"] == 2.0

    def test_timeout_raises_transport_error(self) -> None:
        session = _session()
        session.get.side_effect = requests.exceptions.Timeout("timed out")
        source = EncyclopediaSource(session=session)

        with pytest.raises(TransportError, match="timed out"):
            source.fetch("Paris")
