import pathlib
import sys
import warnings
from contextlib import contextmanager

from _turboinput.token_reader import TokenReader


def make_stream(source, encoding):
    """
    :returns: Tuple of the stream to read from for the given
        source and whether it was opened here.
    """
    if source is None:
        return sys.stdin, False
    if isinstance(source, (str, pathlib.Path)):
        return open(source, "rt", encoding=encoding), True
    return source, False


@contextmanager
def open_reader(source=None, encoding="utf-8", warn_unread=True):
    """
    Creates a TokenReader for the given source, ie.

    >>> with open_reader("input.txt") as reader:
    ...     n = reader.next_token(int)
    ...     values = reader.read_vector(n, int)

    :param source: None for standard input, a path to a file, or a stream.
        Files opened from a path are closed on exit, given streams are not.
    :param encoding: The encoding of the input.
    :param warn_unread: If True, a warning is emitted on exit when tokens
        of the last read line were left unconsumed.
    """
    stream, did_open = make_stream(source, encoding)
    reader = TokenReader(stream, encoding=encoding)
    try:
        yield reader
    finally:
        if did_open:
            stream.close()

    unread = reader.pending_tokens
    if warn_unread and unread:
        warnings.warn(
            f"{len(unread)} token(s) left unread on line {reader.line_number}:"
            f" {' '.join(unread)}"
        )
