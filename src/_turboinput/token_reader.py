import io

import numpy as np

from _turboinput.errors import StreamExhaustedError, VertexOutOfRangeError
from _turboinput.parsing import parse_token


class TokenReader:
    """
    Reads whitespace separated tokens from a line oriented stream and
    converts them to the requested kind.

    >>> reader = TokenReader(io.StringIO("42 3.14 hello\\n1 2 3\\n"))
    >>> reader.next_token(int)
    42
    >>> reader.next_token(float)
    3.14
    >>> reader.read_string()
    'hello'
    >>> reader.read_vector(3, int)
    [1, 2, 3]

    """

    def __init__(self, stream, encoding="utf-8"):
        """
        :param stream: Any object with a readline method, such as sys.stdin,
            an open file or io.StringIO. readline should return an empty
            string at the end of the stream.
        :param encoding: Encoding used to decode lines if the stream
            gives bytes.
        """
        self.stream = stream
        self.encoding = encoding
        self.line_number = 0
        self._tokens = []
        self._position = 0

    @classmethod
    def from_string(cls, text):
        return cls(io.StringIO(text))

    @property
    def pending_tokens(self):
        """
        The tokens of the current line which have not been consumed yet.
        """
        return self._tokens[self._position :]

    def refill(self):
        """
        Replaces the pending tokens with the tokens of the next line
        in the stream, which may be none for a blank line.
        """
        line = self.stream.readline()
        if not line:
            raise StreamExhaustedError(
                f"Reached end of stream after {self.line_number} lines"
                " while expecting another token"
            )
        if isinstance(line, bytes):
            line = line.decode(self.encoding)
        self.line_number += 1
        self._tokens = line.split()
        self._position = 0

    def next_token(self, kind=str):
        """
        Consumes the next token and converts it to the given kind.
        The token is consumed even if the conversion fails.

        :param kind: str, a numpy dtype or any callable
            taking the token text, see parse_token.
        :raises StreamExhaustedError: If the stream ends before
            another token is found.
        :raises ParseMismatchError: If the token could not be converted.
        """
        while self._position >= len(self._tokens):
            self.refill()
        token = self._tokens[self._position]
        self._position += 1
        return parse_token(token, kind, self.line_number)

    def read_vector(self, n, kind=str):
        return [self.next_token(kind) for _ in range(n)]

    def read_matrix(self, rows, cols, kind=str):
        """
        Reads rows * cols tokens in row-major order, ie.
        "1 2 3\\n4 5 6" gives [[1, 2, 3], [4, 5, 6]] for rows=2, cols=3.
        Line breaks do not have to coincide with the end of rows.
        """
        return [self.read_vector(cols, kind) for _ in range(rows)]

    def read_array(self, shape, dtype=np.int64):
        """
        Reads tokens into a numpy array of the given shape in
        row-major order, each token converted with the dtype.

        :param shape: Either an int or a tuple of ints.
        """
        count = int(np.prod(shape))
        values = self.read_vector(count, dtype)
        return np.array(values, dtype=dtype).reshape(shape)

    def read_string(self):
        return self.next_token(str)

    def read_chars(self):
        return list(self.read_string())

    def read_graph(self, n, m, directed):
        """
        Reads m edges as pairs of vertex numbers "u v" and returns the
        adjacency lists of the graph. Vertices are numbered 1 to n, so the
        returned list has n + 1 entries where entry 0 is always empty.

        Neighbors are listed in the order their edges were read. Duplicate
        edges are kept, and for an undirected graph a self-loop lists the
        vertex twice as its own neighbor.

        >>> reader = TokenReader.from_string("1 2\\n2 3")
        >>> reader.read_graph(3, 2, directed=False)
        [[], [2], [1, 3], [2]]

        :param n: Number of vertices.
        :param m: Number of edges.
        :param directed: If False, each edge is added in both directions.
        :raises VertexOutOfRangeError: If an endpoint is not in 1..n.
        """
        adjacency = [[] for _ in range(n + 1)]
        for _ in range(m):
            u = self.next_token(int)
            v = self.next_token(int)
            for vertex in (u, v):
                if not 1 <= vertex <= n:
                    raise VertexOutOfRangeError(
                        f"Edge ({u}, {v}) on line {self.line_number} has"
                        f" endpoint {vertex} outside of vertices 1..{n}"
                    )
            adjacency[u].append(v)
            if not directed:
                adjacency[v].append(u)
        return adjacency
