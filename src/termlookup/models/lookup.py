"""Lookup result models.

Normalized, immutable representation of what each source returned for one
term, plus the per-source outcome wrapper used to report partial success.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from termlookup.lib.errors import LookupError

T = TypeVar("T")


class DictionarySense(BaseModel):
    """One (part of speech, definition) pair from the dictionary source."""

    model_config = ConfigDict(frozen=True)

    part_of_speech: str = Field(..., description="Part of speech label")
    definition: str = Field(..., description="Definition text")


class DictionaryLookup(BaseModel):
    """Ordered senses for a term.

    ``found`` separates "term not found" (``False``) from "found with zero
    senses" (``True`` with empty ``senses``). Both render identically.
    """

    model_config = ConfigDict(frozen=True)

    senses: tuple[DictionarySense, ...] = Field(
        default=(), description="Senses flattened in document order"
    )
    found: bool = Field(True, description="Whether the service knew the term")

    @classmethod
    def not_found(cls) -> DictionaryLookup:
        """Result for a term the dictionary service does not know."""
        return cls(senses=(), found=False)

    @property
    def is_empty(self) -> bool:
        """True when there is nothing to print."""
        return not self.senses


class LookupResult(BaseModel):
    """Combined data from both sources for one term."""

    model_config = ConfigDict(frozen=True)

    dictionary: DictionaryLookup = Field(..., description="Dictionary senses")
    encyclopedia: str | None = Field(
        None, description="Encyclopedia extract, or None when absent"
    )


@dataclass(frozen=True)
class SourceOutcome(Generic[T]):
    """Success value or source-tagged error for a single source."""

    value: T | None = None
    error: LookupError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class LookupOutcome:
    """Independent outcomes of both sources for one term.

    The two outcomes are only joined when rendering or deciding the exit
    code, so one source failing never hides the other's data.
    """

    term: str
    encoded_term: str
    dictionary: SourceOutcome[DictionaryLookup]
    encyclopedia: SourceOutcome[str]

    @property
    def errors(self) -> list[LookupError]:
        """Failures in dictionary-then-encyclopedia order."""
        return [
            outcome.error
            for outcome in (self.dictionary, self.encyclopedia)
            if outcome.error is not None
        ]

    @property
    def ok(self) -> bool:
        return not self.errors

    def result(self) -> LookupResult:
        """Join both outcomes into a LookupResult.

        Raises:
            LookupError: The first source failure, if any source failed
        """
        errors = self.errors
        if errors:
            raise errors[0]
        return LookupResult(
            dictionary=self.dictionary.value or DictionaryLookup.not_found(),
            encyclopedia=self.encyclopedia.value,
        )
