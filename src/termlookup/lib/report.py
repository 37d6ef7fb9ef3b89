"""Plain-text report rendering.

The section headers and the ``N/A`` placeholder are read by scripts, so the
layout must not change.
"""

from termlookup.models.lookup import DictionaryLookup, LookupOutcome, LookupResult

DEFINITIONS_HEADER = "Definitions:"
ENCYCLOPEDIA_HEADER = "Wikipedia:"
NOT_AVAILABLE = "N/A"


def render_definitions(dictionary: DictionaryLookup) -> str:
    """Render the Definitions section, numbering senses from 1."""
    if dictionary.is_empty:
        return f"{DEFINITIONS_HEADER}\n{NOT_AVAILABLE}"
    lines = [DEFINITIONS_HEADER]
    lines.extend(
        f"{index}. ({sense.part_of_speech}) {sense.definition}"
        for index, sense in enumerate(dictionary.senses, start=1)
    )
    return "\n".join(lines)


def render_encyclopedia(extract: str | None) -> str:
    """Render the Wikipedia section with the extract trimmed."""
    if extract is None:
        return f"{ENCYCLOPEDIA_HEADER}\n{NOT_AVAILABLE}"
    return f"{ENCYCLOPEDIA_HEADER}\n{extract.strip()}"


def render(result: LookupResult) -> str:
    """Render the full two-section report.

    Args:
        result: Combined lookup result

    Returns:
        Report text without a trailing newline
    """
    return "\n\n".join(
        [
            render_definitions(result.dictionary),
            render_encyclopedia(result.encyclopedia),
        ]
    )


def render_outcome(outcome: LookupOutcome) -> str:
    """Render the sections of the sources that succeeded.

    When both sources succeeded this is identical to ``render``. A failed
    source's section is left out; its error is reported separately.

    Args:
        outcome: Per-source lookup outcome

    Returns:
        Report text, empty when both sources failed
    """
    sections: list[str] = []
    if outcome.dictionary.ok and outcome.dictionary.value is not None:
        sections.append(render_definitions(outcome.dictionary.value))
    if outcome.encyclopedia.ok:
        sections.append(render_encyclopedia(outcome.encyclopedia.value))
    return "\n\n".join(sections)
