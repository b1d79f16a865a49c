class TokenReaderError(Exception):
    """
    Base class of all errors raised when reading tokens.
    """

    pass


class StreamExhaustedError(TokenReaderError, EOFError):
    """
    Raised when a token is requested but the stream has no more input.
    """

    pass


class ParseMismatchError(TokenReaderError, ValueError):
    """
    Raised when a token could not be converted to the requested kind,
    ie. reading "abc" as an int.
    """

    def __init__(self, message, token, kind, line=None):
        super().__init__(message)
        self.token = token
        self.kind = kind
        self.line = line


class VertexOutOfRangeError(TokenReaderError, IndexError):
    """
    Raised when an edge read by TokenReader.read_graph has an endpoint
    outside of the vertices 1..n.
    """

    pass
