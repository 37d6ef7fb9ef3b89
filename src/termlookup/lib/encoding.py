"""Percent-encoding of lookup terms.

Both services take the term as a path segment or query value. Spaces must be
sent as ``%20`` rather than ``+``, so the term is encoded here instead of
being left to the HTTP library's form encoding.
"""

from urllib.parse import quote


def percent_encode(term: str) -> str:
    """Encode a term into a transport-safe path or query segment.

    Unreserved characters (letters, digits and ``-_.~``) pass through, a
    space becomes ``%20`` and every other character is emitted as its UTF-8
    bytes, each as ``%XX`` with uppercase hex digits.

    Args:
        term: Raw user input

    Returns:
        Encoded string; decoding it with a standard percent-decoder
        returns ``term`` unchanged.

    Example:
        >>> percent_encode("café au lait")
        'caf%C3%A9%20au%20lait'
    """
    # surrogatepass keeps lone surrogates encodable
    return quote(term, safe="", errors="surrogatepass")
