"""Query component codec.

Decoding treats ``+`` as a space before percent-decoding, as query
strings do. Only runs of ``%XX`` escapes are decoded as UTF-8; any other
text, non-ASCII or not, is returned unchanged. Encoding matches
``encodeURIComponent``: spaces become ``%20``, never ``+``.
"""

import logging
import re
from urllib.parse import quote, unquote_to_bytes

from searchparams.errors import DecodeError, EncodeError

logger = logging.getLogger("searchparams")

# quote() always keeps ASCII letters, digits and "_.-~"
_SAFE = "!'()*"

_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_ESCAPE_RUN = re.compile(r"(?:%[0-9A-Fa-f]{2})+")


def decode_component(value: str) -> str:
    """Decode one key or value from a raw query string.

    Args:
        value: Raw text between separators, without the ``=``.

    Returns:
        The text with ``+`` replaced by spaces and ``%XX`` escapes decoded
        as UTF-8. Unescaped characters pass through as they are.

    Raises:
        DecodeError: A ``%`` is not followed by two hex digits, or a run
            of escapes is not valid UTF-8.
    """
    text = value.replace("+", " ")
    if "%" not in text:
        return text

    bad = _BAD_ESCAPE.search(text)
    if bad is not None:
        logger.debug("Rejecting query component %r: bad escape at %d", value, bad.start())
        raise DecodeError(value=value, position=bad.start())

    parts: list[str] = []
    last = 0
    for run in _ESCAPE_RUN.finditer(text):
        try:
            decoded = unquote_to_bytes(run.group()).decode("utf-8")
        except UnicodeDecodeError as exc:
            # each byte of the run is three characters of "%XX"
            position = run.start() + 3 * exc.start
            logger.debug("Rejecting query component %r: %s", value, exc)
            msg = "invalid UTF-8 sequence"
            raise DecodeError(value=value, detail=msg, position=position) from exc
        parts.append(text[last : run.start()])
        parts.append(decoded)
        last = run.end()
    parts.append(text[last:])
    return "".join(parts)


def encode_component(value: str) -> str:
    """Percent-encode one key or value for ``to_string()``.

    Examples::

        >>> encode_component("hi there")
        'hi%20there'
        >>> encode_component("both;encoded")
        'both%3Bencoded'
        >>> encode_component("(it's)")
        "(it's)"
    """
    try:
        return quote(value, safe=_SAFE)
    except UnicodeEncodeError as exc:
        logger.debug("Cannot encode query component %r: %s", value, exc)
        raise EncodeError(value=value) from exc


def stringify(value: object) -> str:
    """Convert a value passed to ``set``/``append`` into its query text.

    Strings pass through. Lists and tuples are joined with commas
    (``None`` items become empty strings). Anything else uses ``str()``.

    Raises:
        TypeError: For ``bytes``-like values, which need an explicit
            decode by the caller.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray, memoryview)):
        msg = f"Cannot use {type(value).__name__} as a query value; decode it to str first"
        raise TypeError(msg)
    if isinstance(value, (list, tuple)):
        return ",".join("" if item is None else stringify(item) for item in value)
    return str(value)
