"""searchparams — URLSearchParams-style query strings for Python.

Parses a query component into an ordered multi-map, lets you read and
edit it, and serializes it back with ``%20`` for spaces.

Basic usage::

    from searchparams import SearchParams

    params = SearchParams("?q=hello+world&tag=a&tag=b")
    params.get("q")         # "hello world"
    params.get_all("tag")   # ["a", "b"]
    params.set("page", 2)
    params.to_string()      # "q=hello%20world&tag=a&tag=b&page=2"
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "DecodeError",
    "EncodeError",
    "ParseConfig",
    "SearchParams",
    "SearchParamsError",
    "decode_component",
    "encode_component",
]

# name -> module that defines it
_LAZY_IMPORTS: dict[str, str] = {
    "ConfigurationError": "searchparams.errors",
    "DecodeError": "searchparams.errors",
    "EncodeError": "searchparams.errors",
    "ParseConfig": "searchparams.config",
    "SearchParams": "searchparams.params",
    "SearchParamsError": "searchparams.errors",
    "decode_component": "searchparams.codec",
    "encode_component": "searchparams.codec",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import searchparams`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    from importlib import import_module

    return getattr(import_module(module_name), name)
