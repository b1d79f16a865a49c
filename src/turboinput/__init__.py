import turboinput.version
from _turboinput.errors import (
    ParseMismatchError,
    StreamExhaustedError,
    TokenReaderError,
    VertexOutOfRangeError,
)
from _turboinput.parsing import parse_token
from _turboinput.reading import open_reader
from _turboinput.token_reader import TokenReader

__version__ = turboinput.version.version

__all__ = [
    "ParseMismatchError",
    "StreamExhaustedError",
    "TokenReader",
    "TokenReaderError",
    "VertexOutOfRangeError",
    "open_reader",
    "parse_token",
]
