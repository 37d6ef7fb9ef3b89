"""termlookup - Look a term up in a dictionary and an encyclopedia.

termlookup queries a dictionary definition service and the Wikipedia
extracts API for a single term and prints a combined plain-text report.

Main features:
- Byte-wise percent-encoding of arbitrary Unicode terms
- Tolerant mapping of both services' JSON payloads
- Independent per-source results, so one failing source never hides the other
"""

from termlookup.lib.encoding import percent_encode
from termlookup.lib.errors import (
    LookupError,
    ParseError,
    TermLookupError,
    TransportError,
)
from termlookup.lib.report import render
from termlookup.services.lookup import lookup

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "LookupError",
    "ParseError",
    "TermLookupError",
    "TransportError",
    "lookup",
    "percent_encode",
    "render",
]
