"""Wire models for the dictionary service payload.

These Pydantic models map to the JSON returned by
``GET /api/v2/entries/en/{term}`` on dictionaryapi.dev. Only the fields the
report needs are declared; everything else in the payload is ignored so new
upstream fields never break parsing.
"""

from pydantic import BaseModel, ConfigDict, Field, StrictStr


class DefinitionPayload(BaseModel):
    """One definition within a meaning."""

    model_config = ConfigDict(extra="ignore")

    definition: StrictStr = Field(..., description="Definition text")


class MeaningPayload(BaseModel):
    """A group of definitions sharing one part of speech."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    part_of_speech: StrictStr = Field(
        ..., alias="partOfSpeech", description="Part of speech (noun, verb, ...)"
    )
    definitions: list[DefinitionPayload] = Field(
        ..., description="Definitions in source order"
    )


class EntryPayload(BaseModel):
    """A top-level dictionary entry for the term."""

    model_config = ConfigDict(extra="ignore")

    meanings: list[MeaningPayload] = Field(
        ..., description="Meanings in source order"
    )
