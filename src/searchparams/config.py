"""Parse and serialize options.

ParseConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass

from searchparams.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Options for ``SearchParams``. Immutable after creation.

    The defaults give ``URLSearchParams``-compatible behaviour. Override
    what you need::

        config = ParseConfig(separator=";", decode_bare_keys=True)
    """

    # Segment separator, used for both parsing and ``to_string()``
    separator: str = "&"

    # Percent/plus-decode keys of segments with no "=" (e.g. "a%20b")
    decode_bare_keys: bool = False

    def __post_init__(self) -> None:
        if not self.separator:
            msg = "ParseConfig.separator must be a non-empty string"
            raise ConfigurationError(msg)
        if "=" in self.separator:
            msg = f"ParseConfig.separator cannot contain '=': {self.separator!r}"
            raise ConfigurationError(msg)


DEFAULT_CONFIG = ParseConfig()
