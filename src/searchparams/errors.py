"""searchparams exception hierarchy.

Shared across the codec, config, and ``SearchParams`` so every module
raises and catches the same types.
"""

from dataclasses import dataclass


class SearchParamsError(Exception):
    """Base for all searchparams-specific errors."""


class ConfigurationError(SearchParamsError):
    """Raised when a ``ParseConfig`` is invalid.

    Typically raised from ``ParseConfig.__post_init__`` at creation time.
    """


@dataclass(frozen=True, slots=True)
class DecodeError(SearchParamsError, ValueError):
    """A query component could not be percent-decoded.

    Raised for a ``%`` that is not followed by two hex digits, or for
    escapes that do not form valid UTF-8. Propagates out of
    ``SearchParams(...)``, so a store is never partially constructed.
    """

    value: str
    detail: str = "malformed percent-escape"
    position: int | None = None

    def __str__(self) -> str:
        if self.position is not None:
            return f"{self.detail} at offset {self.position} in {self.value!r}"
        return f"{self.detail} in {self.value!r}"


@dataclass(frozen=True, slots=True)
class EncodeError(SearchParamsError, ValueError):
    """A key or value could not be percent-encoded (e.g. a lone surrogate)."""

    value: str
    detail: str = "cannot encode as UTF-8"

    def __str__(self) -> str:
        return f"{self.detail}: {self.value!r}"
