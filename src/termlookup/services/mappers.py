"""Response mappers for the dictionary and encyclopedia sources.

Each mapper turns a raw HTTP payload into the normalized lookup models.
Missing optional data yields an empty result; a malformed document raises
ParseError.
"""

import json
import logging
from typing import Any

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from termlookup.lib.errors import ParseError, Source
from termlookup.models.lookup import DictionaryLookup, DictionarySense
from termlookup.models.responses import EntryPayload

logger = logging.getLogger(__name__)

HTTP_NOT_FOUND = 404

_ENTRIES_ADAPTER = TypeAdapter(list[EntryPayload])


def _describe_validation_error(error: PydanticValidationError) -> str:
    """Summarize the first pydantic error as ``location: message``."""
    first = error.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    message = first.get("msg", "invalid value")
    count = error.error_count()
    suffix = f" (+{count - 1} more)" if count > 1 else ""
    return f"{location}: {message}{suffix}" if location else f"{message}{suffix}"


def map_dictionary(status: int, body: bytes) -> DictionaryLookup:
    """Map a dictionary service response to a DictionaryLookup.

    Args:
        status: HTTP status code of the response
        body: Raw response body

    Returns:
        Senses flattened as entries, then meanings, then definitions.
        A 404 yields an empty, not-found lookup.

    Raises:
        ParseError: Body is not JSON or does not have the entry shape
    """
    if status == HTTP_NOT_FOUND:
        logger.debug("Dictionary has no entry for term (HTTP 404)")
        return DictionaryLookup.not_found()

    try:
        entries = _ENTRIES_ADAPTER.validate_json(body)
    except PydanticValidationError as e:
        raise ParseError(
            Source.DICTIONARY, _describe_validation_error(e), status=status
        ) from e

    senses = tuple(
        DictionarySense(
            part_of_speech=meaning.part_of_speech,
            definition=definition.definition,
        )
        for entry in entries
        for meaning in entry.meanings
        for definition in meaning.definitions
    )
    logger.debug(f"Mapped {len(entries)} dictionary entries to {len(senses)} senses")
    return DictionaryLookup(senses=senses, found=True)


def map_encyclopedia(body: bytes) -> str | None:
    """Map an encyclopedia ``action=query`` response to an extract.

    ``query.pages`` is keyed by page id. The first page, in the mapping's
    traversal order, with a non-empty string ``extract`` wins; extracts of
    other pages are never merged in. Text is returned untrimmed.

    Args:
        body: Raw response body

    Returns:
        The extract text, or None when no page has one

    Raises:
        ParseError: Body is not JSON or ``query``/``pages`` have the wrong type
    """
    try:
        document: Any = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ParseError(Source.ENCYCLOPEDIA, f"invalid JSON: {e}") from e

    if not isinstance(document, dict):
        raise ParseError(
            Source.ENCYCLOPEDIA,
            f"expected an object at top level, got {type(document).__name__}",
        )

    query = document.get("query")
    if query is None:
        return None
    if not isinstance(query, dict):
        raise ParseError(
            Source.ENCYCLOPEDIA, f"'query' is {type(query).__name__}, not an object"
        )

    pages = query.get("pages")
    if pages is None:
        return None
    if not isinstance(pages, dict):
        raise ParseError(
            Source.ENCYCLOPEDIA,
            f"'query.pages' is {type(pages).__name__}, not an object",
        )

    for page_id, page in pages.items():
        if not isinstance(page, dict):
            raise ParseError(
                Source.ENCYCLOPEDIA,
                f"page '{page_id}' is {type(page).__name__}, not an object",
            )
        extract = page.get("extract")
        if isinstance(extract, str) and extract:
            logger.debug(f"Using extract from page {page_id}")
            return extract

    logger.debug(f"No extract in {len(pages)} encyclopedia pages")
    return None
