"""Data models for lookup results and service payloads."""

from termlookup.models.lookup import (
    DictionaryLookup,
    DictionarySense,
    LookupOutcome,
    LookupResult,
    SourceOutcome,
)

__all__ = [
    "DictionaryLookup",
    "DictionarySense",
    "LookupOutcome",
    "LookupResult",
    "SourceOutcome",
]
