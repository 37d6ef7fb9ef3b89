"""Lookup aggregation across the dictionary and encyclopedia sources."""

import logging
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from typing import TypeVar

from termlookup.lib.encoding import percent_encode
from termlookup.lib.errors import LookupError, ParseError, Source, TransportError
from termlookup.models.lookup import DictionaryLookup, LookupOutcome, SourceOutcome
from termlookup.services.mappers import map_dictionary, map_encyclopedia
from termlookup.services.sources import LookupSource

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _run_source(source: Source, fetch_and_map: Callable[[], T]) -> SourceOutcome[T]:
    """Run one source path and capture its failure as a tagged error."""
    try:
        value = fetch_and_map()
    except (TransportError, ParseError) as e:
        logger.debug(f"{source.value} source failed: {e}", exc_info=True)
        return SourceOutcome(error=LookupError(source, e))
    return SourceOutcome(value=value)


def fetch_dictionary(source: LookupSource, encoded_term: str) -> DictionaryLookup:
    """Fetch and map dictionary senses for an encoded term."""
    response = source.fetch(encoded_term)
    return map_dictionary(response.status, response.body)


def fetch_encyclopedia(source: LookupSource, encoded_term: str) -> str | None:
    """Fetch and map the encyclopedia extract for an encoded term."""
    response = source.fetch(encoded_term)
    return map_encyclopedia(response.body)


def lookup(
    term: str,
    dictionary_source: LookupSource,
    encyclopedia_source: LookupSource,
    *,
    parallel: bool = False,
) -> LookupOutcome:
    """Look a term up in both sources.

    The term is encoded once and the same encoded form is sent to both
    sources. Each source succeeds or fails on its own; a failure is returned
    as a source-tagged LookupError inside the outcome and never hides the
    other source's result.

    Args:
        term: Non-empty term to look up
        dictionary_source: Source for dictionary entries
        encyclopedia_source: Source for encyclopedia extracts
        parallel: Run both fetches on worker threads instead of one after
            the other

    Returns:
        LookupOutcome with an independent outcome per source

    Raises:
        ValueError: If term is empty
    """
    if not term:
        raise ValueError("term must not be empty")

    encoded = percent_encode(term)
    logger.info(f"Looking up {term!r} (encoded as {encoded})")

    def dictionary_path() -> SourceOutcome[DictionaryLookup]:
        return _run_source(
            Source.DICTIONARY, lambda: fetch_dictionary(dictionary_source, encoded)
        )

    def encyclopedia_path() -> SourceOutcome[str]:
        return _run_source(
            Source.ENCYCLOPEDIA,
            lambda: fetch_encyclopedia(encyclopedia_source, encoded),
        )

    if parallel:
        with ThreadPoolExecutor(max_workers=2, thread_name_prefix="lookup") as pool:
            dictionary_future = pool.submit(dictionary_path)
            encyclopedia_future = pool.submit(encyclopedia_path)
            dictionary = dictionary_future.result()
            encyclopedia = encyclopedia_future.result()
    else:
        dictionary = dictionary_path()
        encyclopedia = encyclopedia_path()

    outcome = LookupOutcome(
        term=term,
        encoded_term=encoded,
        dictionary=dictionary,
        encyclopedia=encyclopedia,
    )
    logger.info(
        f"Lookup finished: dictionary={'ok' if dictionary.ok else 'failed'}, "
        f"encyclopedia={'ok' if encyclopedia.ok else 'failed'}"
    )
    return outcome
