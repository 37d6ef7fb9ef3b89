"""Pytest configuration and shared fixtures for termlookup tests."""

import json
import logging
from collections.abc import Callable, Generator
from typing import Any

import pytest

from termlookup.lib.errors import TransportError
from termlookup.services.sources import SourceResponse


class FakeSource:
    """In-memory source that records the encoded terms it was asked for."""

    def __init__(
        self,
        response: SourceResponse | None = None,
        error: Exception | None = None,
    ) -> None:
        self.response = response or SourceResponse(status=200, body=b"{}")
        self.error = error
        self.calls: list[str] = []

    def fetch(self, encoded_term: str) -> SourceResponse:
        self.calls.append(encoded_term)
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def json_body() -> Callable[[Any], bytes]:
    """Serialize a Python value into a JSON response body."""

    def _encode(value: Any) -> bytes:
        return json.dumps(value).encode("utf-8")

    return _encode


@pytest.fixture
def dictionary_payload() -> list[dict[str, Any]]:
    """Trimmed-down dictionaryapi.dev payload with two entries."""
    return [
        {
            "word": "test",
            "phonetics": [{"text": "/tɛst/"}],
            "meanings": [
                {
                    "partOfSpeech": "noun",
                    "definitions": [
                        {"definition": "A challenge, trial.", "synonyms": []},
                        {"definition": "A cupel or cupelling hearth."},
                    ],
                },
                {
                    "partOfSpeech": "verb",
                    "definitions": [{"definition": "To challenge."}],
                },
            ],
        },
        {
            "word": "test",
            "meanings": [
                {
                    "partOfSpeech": "noun",
                    "definitions": [{"definition": "A witness."}],
                }
            ],
        },
    ]


@pytest.fixture
def encyclopedia_payload() -> dict[str, Any]:
    """MediaWiki extracts query payload with a single page."""
    return {
        "batchcomplete": "",
        "query": {
            "pages": {
                "5843419": {
                    "pageid": 5843419,
                    "ns": 0,
                    "title": "Paris",
                    "extract": "Paris is the capital of France.\n",
                }
            }
        },
    }


@pytest.fixture
def fake_source_factory() -> Callable[..., FakeSource]:
    """Create FakeSource instances."""
    return FakeSource


@pytest.fixture
def transport_error() -> TransportError:
    return TransportError(
        "https://en.wikipedia.org/w/api.php",
        original_error=ConnectionError("Name or service not known"),
    )


@pytest.fixture(autouse=True)
def restore_loggers() -> Generator[None]:
    """Undo logger changes made by setup_logging during a test."""
    names = ("termlookup", "urllib3", "requests")
    saved = {}
    for name in names:
        logger = logging.getLogger(name)
        saved[name] = (logger.level, list(logger.handlers), logger.propagate)
    yield
    for name, (level, handlers, propagate) in saved.items():
        logger = logging.getLogger(name)
        logger.setLevel(level)
        logger.handlers = handlers
        logger.propagate = propagate
